"""
Cart Router

Storefront cart endpoints. Failed operations are not HTTP errors: the
response always carries the current cart plus the toasts raised while
handling the request.
"""
from fastapi import APIRouter, Depends

from rocketshoes.cart import CartStore
from .deps import get_cart_store
from .models import AddToCartRequest, UpdateCartItemRequest

router = APIRouter(tags=["cart"])


def _cart_response(store: CartStore, notifications: list[dict]) -> dict:
    return {
        "cart": [item.model_dump(mode="json") for item in store.cart],
        "notifications": notifications,
    }


@router.get("/cart")
async def get_cart(store: CartStore = Depends(get_cart_store)):
    """Current cart snapshot."""
    return _cart_response(store, [])


@router.get("/cart/amounts")
async def get_cart_amounts(store: CartStore = Depends(get_cart_store)):
    """Amount in cart per product id (product listing badges)."""
    return {str(product_id): amount for product_id, amount in store.cart_items_amount.items()}


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, store: CartStore = Depends(get_cart_store)):
    """Add one unit of a product."""
    with store.notifier.capture() as toasts:
        await store.add_product(request.product_id)
    return _cart_response(store, toasts)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, store: CartStore = Depends(get_cart_store)):
    """Set the amount of a product in the cart."""
    with store.notifier.capture() as toasts:
        await store.update_product_amount(request.product_id, request.amount)
    return _cart_response(store, toasts)


@router.delete("/cart/item")
async def remove_cart_item(product_id: int, store: CartStore = Depends(get_cart_store)):
    """Remove a product from the cart."""
    with store.notifier.capture() as toasts:
        await store.remove_product(product_id)
    return _cart_response(store, toasts)
