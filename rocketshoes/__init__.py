"""
RocketShoes Cart

Components:
- cart: stock-validated cart store and its Redis storage
- services: product API client, models and toast notifications
- i18n: user-facing messages
- routers: FastAPI endpoints

Note: Imports are lazy so importing a submodule does not pull in FastAPI
or the Redis client.
"""

__all__ = [
    "CartStore",
    "create_app",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from rocketshoes.cart import CartStore
        return CartStore
    elif name == "create_app":
        from rocketshoes.app import create_app
        return create_app
    raise AttributeError(f"module 'rocketshoes' has no attribute '{name}'")
