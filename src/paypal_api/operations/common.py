"""Common utilities for PayPal operations modules.

This module contains shared helpers used across all operations modules
(products, plans, subscriptions, webhooks, payouts). Each operation builds a
path, selects a method, optionally attaches a body, sends it through
``RequestSender.request`` and returns the relevant part of the decoded body.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol, TypeAlias
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from ..client.options import RequestOptions

logger = logging.getLogger("paypal_api.operations.common")

# Default pagination used by the list endpoints
DEFAULT_PAGE_SIZE = 2
DEFAULT_PAGE = 1

JsonBody: TypeAlias = dict[str, Any]
RequestBody: TypeAlias = Mapping[str, Any] | BaseModel


class RequestSender(Protocol):
    """Protocol for objects that dispatch authenticated PayPal requests.

    ``PayPalClient`` satisfies it; tests substitute a mock with the same shape.
    """

    async def request(
        self,
        path: str,
        method: str = "GET",
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        """Send a request with a valid bearer token and return the raw response."""
        ...


def resource_path(base: str, *segments: str) -> str:
    """Join a base path with URL-quoted identifier segments.

    Args:
        base: Static endpoint path such as ``/v1/billing/subscriptions``.
        *segments: Identifiers or action names appended in order.

    Returns:
        The combined path.

    """
    quoted = [quote(str(segment), safe="") for segment in segments]
    return "/".join([base.rstrip("/"), *quoted])


def pagination_params(*, page_size: int, page: int) -> dict[str, str]:
    """Build the query parameters shared by paginated list endpoints."""
    return {
        "page_size": str(page_size),
        "page": str(page),
        "total_required": "true",
    }


def serialize_body(data: RequestBody) -> JsonBody:
    """Convert a request body to a JSON-compatible dict.

    Pydantic models are dumped in JSON mode without unset optional fields;
    mappings are copied as-is.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True, by_alias=True)
    return dict(data)


def decode_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or None when the response has no content.

    Raises:
        ValueError: If the body is present but is not valid JSON.

    """
    if not response.content:
        return None
    return response.json()


def extract_field(response: httpx.Response, field: str) -> Any:
    """Return one top-level field of the decoded response body.

    Missing fields and empty bodies yield an empty list, since every field
    extracted this way is a collection.
    """
    body = decode_body(response)
    if not isinstance(body, dict):
        logger.debug("Response has no object body; returning no %s.", field)
        return []
    return body.get(field, [])


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "JsonBody",
    "RequestBody",
    "RequestSender",
    "decode_body",
    "extract_field",
    "pagination_params",
    "resource_path",
    "serialize_body",
]
