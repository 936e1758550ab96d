"""Request models for cart endpoints."""
from pydantic import BaseModel


class AddToCartRequest(BaseModel):
    product_id: int


class UpdateCartItemRequest(BaseModel):
    product_id: int
    amount: int  # values below 1 are rejected by the store with a toast
