"""
Product API Client

Read-only lookups against the storefront's product/stock HTTP API:
- GET /stock/{id}
- GET /products/{id}

Transport failures, non-2xx responses and malformed payloads are all raised
as UpstreamError so cart operations can treat them uniformly.
"""
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from rocketshoes.errors import ERROR_UPSTREAM, UpstreamError
from rocketshoes.logging import get_logger, sanitize_string_for_logging
from .models import Product, Stock

logger = get_logger(__name__)

PRODUCTS_API_URL = os.environ.get("PRODUCTS_API_URL", "http://localhost:3333")
PRODUCTS_API_TIMEOUT = float(os.environ.get("PRODUCTS_API_TIMEOUT", "10"))


class ProductApi:
    """Async client for product and stock lookups."""

    def __init__(
        self,
        base_url: str = PRODUCTS_API_URL,
        timeout: float = PRODUCTS_API_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def _get_json(self, path: str):
        try:
            response = await self._client.get(path)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"{ERROR_UPSTREAM}: GET {path} -> {e.response.status_code}")
            raise UpstreamError(f"{ERROR_UPSTREAM}: GET {path} returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"{ERROR_UPSTREAM}: GET {path}: {sanitize_string_for_logging(str(e), 200)}")
            raise UpstreamError(f"{ERROR_UPSTREAM}: GET {path}: {e}") from e
        except ValueError as e:
            # Body was not JSON
            raise UpstreamError(f"{ERROR_UPSTREAM}: GET {path} returned invalid JSON") from e

    async def get_stock(self, product_id: int) -> Stock:
        """Fetch current stock for a product."""
        data = await self._get_json(f"/stock/{product_id}")
        try:
            return Stock.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"{ERROR_UPSTREAM}: invalid stock payload for {product_id}") from e

    async def get_product(self, product_id: int) -> Product:
        """Fetch the full product record (amount defaults to 1)."""
        data = await self._get_json(f"/products/{product_id}")
        try:
            return Product.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"{ERROR_UPSTREAM}: invalid product payload for {product_id}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
