"""Helpers for the catalog products endpoints."""

import logging
from typing import Any

from ..client.options import RequestOptions
from .common import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    JsonBody,
    RequestBody,
    RequestSender,
    decode_body,
    extract_field,
    pagination_params,
    serialize_body,
)

logger = logging.getLogger("paypal_api.operations.products")

PRODUCTS_PATH = "/v1/catalogs/products"


async def list_products(
    client: RequestSender,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    page: int = DEFAULT_PAGE,
) -> list[dict[str, Any]]:
    """Fetch one page of catalog products.

    Args:
        client: Sender used to dispatch the authenticated request.
        page_size: Number of products per page.
        page: 1-based page number.

    Returns:
        The ``products`` array of the response.

    """
    options = RequestOptions(params=pagination_params(page_size=page_size, page=page))
    response = await client.request(PRODUCTS_PATH, "GET", options)
    return extract_field(response, "products")


async def create_product(client: RequestSender, data: RequestBody) -> JsonBody:
    """Create a catalog product and return it as PayPal echoes it back."""
    response = await client.request(PRODUCTS_PATH, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


__all__ = ["PRODUCTS_PATH", "create_product", "list_products"]
