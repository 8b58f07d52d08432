"""Helpers for the billing plans endpoints."""

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

logger = logging.getLogger("paypal_api.operations.plans")

PLANS_PATH = "/v1/billing/plans"


async def list_plans(
    client: RequestSender,
    product_id: str,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    page: int = DEFAULT_PAGE,
) -> list[dict[str, Any]]:
    """Fetch one page of billing plans attached to a product.

    Args:
        client: Sender used to dispatch the authenticated request.
        product_id: Catalog product whose plans are listed.
        page_size: Number of plans per page.
        page: 1-based page number.

    Returns:
        The ``plans`` array of the response.

    """
    params = {"product_id": product_id, **pagination_params(page_size=page_size, page=page)}
    response = await client.request(PLANS_PATH, "GET", RequestOptions(params=params))
    return extract_field(response, "plans")


async def create_plan(client: RequestSender, data: RequestBody) -> JsonBody:
    """Create a billing plan and return the created plan."""
    response = await client.request(PLANS_PATH, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


__all__ = ["PLANS_PATH", "create_plan", "list_plans"]
