"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock

# Set test environment variables
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("DISPLAY_LANGUAGE", "pt")

from rocketshoes.cart import CartStorage, CartStore  # noqa: E402
from rocketshoes.services.models import Product, Stock  # noqa: E402
from rocketshoes.services.notifications import ToastNotifier  # noqa: E402


class FakeRedis:
    """In-memory stand-in for the async Upstash client."""

    def __init__(self):
        self.data = {}
        self.set_calls = 0

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, **kwargs):
        self.set_calls += 1
        self.data[key] = value
        return "OK"

    async def delete(self, *keys):
        return sum(1 for key in keys if self.data.pop(key, None) is not None)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def storage(fake_redis):
    return CartStorage(fake_redis)


@pytest.fixture
def catalog():
    """Product records served by the mocked API"""
    return {
        1: {"id": 1, "title": "Tênis de Caminhada Leve Confortável", "price": 179.9,
            "image": "https://example.com/tenis1.jpg"},
        2: {"id": 2, "title": "Tênis VR Caminhada Confortável", "price": 139.9,
            "image": "https://example.com/tenis2.jpg"},
        3: {"id": 3, "title": "Tênis Adidas Duramo Lite 2.0", "price": 219.9,
            "image": "https://example.com/tenis3.jpg"},
    }


@pytest.fixture
def stock_levels():
    """Mutable stock per product id"""
    return {1: 5, 2: 10, 3: 2}


@pytest.fixture
def mock_api(catalog, stock_levels):
    """Mock product API backed by catalog and stock_levels"""
    api = AsyncMock()

    async def get_stock(product_id):
        return Stock(id=product_id, amount=stock_levels[product_id])

    async def get_product(product_id):
        return Product.model_validate(catalog[product_id])

    api.get_stock = AsyncMock(side_effect=get_stock)
    api.get_product = AsyncMock(side_effect=get_product)
    return api


@pytest.fixture
def notifier():
    return ToastNotifier()


@pytest.fixture
def cart_store(mock_api, storage, notifier):
    """Empty cart store wired to fakes"""
    return CartStore(api=mock_api, storage=storage, notifier=notifier, lang="pt")


@pytest.fixture
def make_product(catalog):
    """Build a cart entry from the catalog"""
    def _make(product_id, amount=1):
        return Product.model_validate({**catalog[product_id], "amount": amount})
    return _make
