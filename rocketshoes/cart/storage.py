"""Durable cart storage over a single Redis key."""
import json
from typing import List

from pydantic import ValidationError

from rocketshoes.db import RedisKeys
from rocketshoes.errors import ERROR_STORAGE, StorageError
from rocketshoes.logging import get_logger, sanitize_string_for_logging
from rocketshoes.services.models import Product

logger = get_logger(__name__)


def serialize_cart(items: List[Product]) -> str:
    """Encode cart entries field for field, including amount and extras."""
    return json.dumps([item.model_dump(mode="json") for item in items])


def deserialize_cart(data: str) -> List[Product]:
    """Decode a stored cart. Raises ValueError on malformed data."""
    raw = json.loads(data)
    if not isinstance(raw, list):
        raise ValueError("stored cart is not a list")
    return [Product.model_validate(item) for item in raw]


class CartStorage:
    """
    Loads and saves the cart blob.

    The client only needs async get/set/delete, which the Upstash client
    provides.
    """

    def __init__(self, redis, key: str = RedisKeys.CART):
        self._redis = redis
        self.key = key

    async def load(self) -> List[Product]:
        """Read the stored cart; empty when absent or corrupted."""
        try:
            data = await self._redis.get(self.key)
        except Exception as e:
            logger.error(f"{ERROR_STORAGE}: failed to read cart: {e}", exc_info=True)
            raise StorageError(f"{ERROR_STORAGE}: {e}") from e

        if not data:
            return []

        try:
            return deserialize_cart(data)
        except (ValueError, TypeError, ValidationError) as e:
            # Corrupted data - clear it and start empty
            logger.warning(
                f"Corrupted cart data under {self.key}: {sanitize_string_for_logging(str(e), 200)}"
            )

        try:
            await self._redis.delete(self.key)
        except Exception as e:
            logger.error(f"{ERROR_STORAGE}: failed to clear corrupted cart: {e}", exc_info=True)
            raise StorageError(f"{ERROR_STORAGE}: {e}") from e
        return []

    async def save(self, items: List[Product]) -> None:
        """Overwrite the stored cart."""
        try:
            await self._redis.set(self.key, serialize_cart(items))
        except Exception as e:
            logger.error(f"{ERROR_STORAGE}: failed to save cart: {e}", exc_info=True)
            raise StorageError(f"{ERROR_STORAGE}: {e}") from e
