"""Cart package: durable storage and the cart store."""
from .service import CartStore
from .storage import CartStorage, deserialize_cart, serialize_cart

__all__ = [
    "CartStore",
    "CartStorage",
    "deserialize_cart",
    "serialize_cart",
]
