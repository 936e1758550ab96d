"""Cart store: stock-validated mutations persisted to Redis."""
import asyncio
from typing import Dict, List, Optional, Tuple

from rocketshoes.errors import (
    ERROR_UPSTREAM,
    CartError,
    InvalidAmount,
    ProductNotFound,
    StockExceeded,
    UpstreamError,
)
from rocketshoes.i18n import get_text
from rocketshoes.logging import get_logger
from rocketshoes.services.api import ProductApi
from rocketshoes.services.models import Product
from rocketshoes.services.notifications import ToastNotifier
from .storage import CartStorage

logger = get_logger(__name__)


class CartStore:
    """
    Authoritative cart for the current session.

    Features:
    - Every quantity increase is checked against live stock
    - Failed operations raise exactly one toast and change nothing
    - The new cart is saved before it replaces the in-memory one, so a
      failed save leaves both untouched
    """

    def __init__(
        self,
        api: ProductApi,
        storage: CartStorage,
        notifier: ToastNotifier,
        lang: Optional[str] = None,
    ):
        self.api = api
        self.storage = storage
        self.notifier = notifier
        self.lang = lang
        self._items: List[Product] = []
        # Single writer for read-validate-write sequences
        self._lock = asyncio.Lock()

    async def load(self) -> None:
        """Replace the in-memory cart with the stored one."""
        async with self._lock:
            self._items = await self.storage.load()
        logger.info(f"Cart loaded with {len(self._items)} products")

    @property
    def cart(self) -> Tuple[Product, ...]:
        """Immutable snapshot of the current cart."""
        return tuple(self._items)

    @property
    def cart_items_amount(self) -> Dict[int, int]:
        """Amount in cart keyed by product id."""
        return {item.id: item.amount for item in self._items}

    def _find(self, product_id: int) -> Optional[Product]:
        return next((item for item in self._items if item.id == product_id), None)

    async def _check_stock(self, product_id: int, amount: int) -> None:
        stock = await self.api.get_stock(product_id)
        if amount > stock.amount:
            raise StockExceeded(product_id, amount, stock.amount)

    async def _commit(self, items: List[Product]) -> None:
        await self.storage.save(items)
        self._items = items

    def _report(self, error: CartError, failure_key: str) -> None:
        if isinstance(error, StockExceeded):
            logger.info(str(error))
            self.notifier.error(get_text("cart.stock_exceeded", self.lang))
        else:
            logger.warning(f"Cart operation failed: {error}")
            self.notifier.error(get_text(failure_key, self.lang))

    async def add_product(self, product_id: int) -> bool:
        """Add one unit of a product, appending it if not yet in the cart."""
        async with self._lock:
            try:
                existing = self._find(product_id)
                amount = existing.amount + 1 if existing else 1

                await self._check_stock(product_id, amount)

                if existing:
                    updated = [
                        item.with_amount(amount) if item.id == product_id else item
                        for item in self._items
                    ]
                else:
                    product = await self.api.get_product(product_id)
                    if product.id != product_id:
                        raise UpstreamError(
                            f"{ERROR_UPSTREAM}: asked for product {product_id}, got {product.id}"
                        )
                    updated = [*self._items, product.with_amount(1)]

                await self._commit(updated)
            except CartError as e:
                self._report(e, "cart.add_failed")
                return False
        return True

    async def remove_product(self, product_id: int) -> bool:
        """Remove a product entry. Needs no stock lookup."""
        async with self._lock:
            try:
                if self._find(product_id) is None:
                    raise ProductNotFound(product_id)
                await self._commit([item for item in self._items if item.id != product_id])
            except CartError as e:
                self._report(e, "cart.remove_failed")
                return False
        return True

    async def update_product_amount(self, product_id: int, amount: int) -> bool:
        """Set the amount of a product already in the cart."""
        async with self._lock:
            try:
                if amount < 1:
                    raise InvalidAmount(amount)
                if self._find(product_id) is None:
                    raise ProductNotFound(product_id)

                await self._check_stock(product_id, amount)

                await self._commit([
                    item.with_amount(amount) if item.id == product_id else item
                    for item in self._items
                ])
            except CartError as e:
                self._report(e, "cart.update_failed")
                return False
        return True
