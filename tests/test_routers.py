"""Tests for cart HTTP endpoints"""
import pytest
from unittest.mock import AsyncMock, patch
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rocketshoes.app import create_app
from rocketshoes.routers import cart_router


@pytest.fixture
def client(cart_store):
    """Test client whose lifespan injects the fixture cart store"""
    async def factory():
        await cart_store.load()
        return cart_store

    with TestClient(create_app(store_factory=factory)) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_empty_cart(client):
    response = client.get("/cart")

    assert response.status_code == 200
    assert response.json() == {"cart": [], "notifications": []}


def test_add_then_update_then_remove(client):
    response = client.post("/cart/add", json={"product_id": 1})
    body = response.json()
    assert response.status_code == 200
    assert [(p["id"], p["amount"]) for p in body["cart"]] == [(1, 1)]
    assert body["notifications"] == []

    response = client.patch("/cart/item", json={"product_id": 1, "amount": 4})
    assert [(p["id"], p["amount"]) for p in response.json()["cart"]] == [(1, 4)]

    assert client.get("/cart/amounts").json() == {"1": 4}

    response = client.delete("/cart/item", params={"product_id": 1})
    assert response.json()["cart"] == []


def test_failure_reported_as_notification(client, stock_levels):
    stock_levels[3] = 0

    response = client.post("/cart/add", json={"product_id": 3})

    assert response.status_code == 200
    assert response.json() == {
        "cart": [],
        "notifications": [{"type": "error", "message": "Quantidade solicitada fora de estoque"}],
    }


def test_remove_missing_reports_failure(client):
    response = client.delete("/cart/item", params={"product_id": 2})

    assert response.json()["notifications"] == [
        {"type": "error", "message": "Erro na remoção do produto"}
    ]


def test_store_not_initialized():
    app = FastAPI()
    app.include_router(cart_router)

    with TestClient(app) as test_client:
        response = test_client.get("/cart")

    assert response.status_code == 503


@pytest.mark.asyncio
async def test_shutdown_closes_redis_when_api_close_fails(cart_store):
    cart_store.api.aclose = AsyncMock(side_effect=RuntimeError("already closed"))
    close_redis = AsyncMock()

    with patch("rocketshoes.app.build_cart_store", AsyncMock(return_value=cart_store)), \
            patch("rocketshoes.app.close_redis", close_redis):
        app = create_app()
        with pytest.raises(RuntimeError):
            async with app.router.lifespan_context(app):
                assert app.state.cart_store is cart_store

    close_redis.assert_awaited_once()
