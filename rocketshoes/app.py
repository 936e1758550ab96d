"""
RocketShoes Cart API - FastAPI Application

Composition root: the lifespan handler builds the product API client, the
Redis-backed storage and the cart store once, loads the stored cart, and
exposes the store to routers through app.state.
"""
from contextlib import asynccontextmanager
from typing import Callable, Optional

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from rocketshoes.cart import CartStorage, CartStore  # noqa: E402
from rocketshoes.db import close_redis, get_redis  # noqa: E402
from rocketshoes.logging import get_logger  # noqa: E402
from rocketshoes.routers import cart_router  # noqa: E402
from rocketshoes.services import ProductApi, ToastNotifier  # noqa: E402

logger = get_logger(__name__)


async def build_cart_store() -> CartStore:
    """Default wiring: HTTP product API and Upstash Redis storage."""
    store = CartStore(
        api=ProductApi(),
        storage=CartStorage(get_redis()),
        notifier=ToastNotifier(),
    )
    await store.load()
    return store


def create_app(store_factory: Optional[Callable] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store_factory: async callable returning a loaded CartStore
            (defaults to build_cart_store)
    """
    factory = store_factory or build_cart_store

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        store = await factory()
        app.state.cart_store = store
        logger.info("Cart store ready")
        yield
        try:
            await store.api.aclose()
        finally:
            if factory is build_cart_store:
                await close_redis()

    app = FastAPI(
        title="RocketShoes Cart",
        description="Stock-validated shopping cart API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(cart_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "rocketshoes-cart"}

    return app


app = create_app()
