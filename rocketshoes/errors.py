"""
Cart Errors

Exception taxonomy for cart operations plus centralized log messages.
Cart operations raise these internally and convert them to a single user
notification at the operation boundary.
"""

# Log messages
ERROR_PRODUCT_NOT_IN_CART = "Product not in cart"
ERROR_STOCK_EXCEEDED = "Requested amount exceeds stock"
ERROR_INVALID_AMOUNT = "Amount must be at least 1"
ERROR_UPSTREAM = "Product API request failed"
ERROR_STORAGE = "Cart storage unavailable"


class CartError(Exception):
    """Base class for errors raised by cart operations."""


class StockExceeded(CartError):
    """Desired amount is greater than the available stock."""

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"{ERROR_STOCK_EXCEEDED}: product {product_id} requested {requested}, available {available}"
        )


class ProductNotFound(CartError):
    """Product is not present in the cart."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"{ERROR_PRODUCT_NOT_IN_CART}: {product_id}")


class InvalidAmount(CartError):
    """Requested amount is below 1."""

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(f"{ERROR_INVALID_AMOUNT}: {amount}")


class UpstreamError(CartError):
    """Product/stock lookup failed (transport, status or payload)."""


class StorageError(CartError):
    """Durable cart storage could not be read or written."""
