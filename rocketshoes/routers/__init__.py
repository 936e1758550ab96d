"""
FastAPI Routers Package

All routers are included by rocketshoes.app.
"""

from rocketshoes.routers.cart import router as cart_router

__all__ = [
    "cart_router",
]
