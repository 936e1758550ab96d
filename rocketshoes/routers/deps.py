"""
Shared Dependencies for Routers

The cart store is built once by the application lifespan and kept on
app.state; handlers receive it through Depends.
"""

from fastapi import HTTPException, Request

from rocketshoes.cart import CartStore


def get_cart_store(request: Request) -> CartStore:
    """Cart store for the running application."""
    store = getattr(request.app.state, "cart_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Cart store not initialized")
    return store
