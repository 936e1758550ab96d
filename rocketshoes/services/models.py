"""Product API Models - Pydantic models for catalog entities."""
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product record as stored in the cart.

    Frozen so cart snapshots can be handed out without copying. Display
    fields the API adds beyond these are kept as extras and persisted.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    id: int
    title: str
    price: float
    image: str
    amount: int = Field(default=1, ge=1)  # units in the cart

    def with_amount(self, amount: int) -> "Product":
        """Copy of this entry with a new cart amount."""
        return self.model_validate({**self.model_dump(), "amount": amount})


class Stock(BaseModel):
    """Upstream stock level."""
    model_config = ConfigDict(extra="ignore")

    id: int
    amount: int = Field(ge=0)
