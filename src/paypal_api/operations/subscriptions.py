"""Helpers for the billing subscriptions endpoints.

Subscription actions (``cancel``, ``activate``, ``capture``) are POSTs to
sub-resources of a single subscription. PayPal answers ``cancel`` and
``activate`` with 204 No Content and ``capture`` with 202 Accepted, so those
helpers return ``None`` when the body is empty.
"""

import logging
from typing import Any

from ..client.options import RequestOptions
from .common import (
    JsonBody,
    RequestBody,
    RequestSender,
    decode_body,
    extract_field,
    resource_path,
    serialize_body,
)

logger = logging.getLogger("paypal_api.operations.subscriptions")

SUBSCRIPTIONS_PATH = "/v1/billing/subscriptions"


def _status_change_options(reason: str | None) -> RequestOptions:
    if reason is None:
        return RequestOptions()
    return RequestOptions(json={"reason": reason})


async def create_subscription(client: RequestSender, data: RequestBody) -> JsonBody:
    """Create a subscription and return PayPal's response, including approval links."""
    response = await client.request(SUBSCRIPTIONS_PATH, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


async def get_subscription(client: RequestSender, subscription_id: str) -> JsonBody:
    """Return the details of one subscription."""
    response = await client.request(resource_path(SUBSCRIPTIONS_PATH, subscription_id), "GET")
    return decode_body(response)


async def cancel_subscription(
    client: RequestSender,
    subscription_id: str,
    *,
    reason: str | None = None,
) -> JsonBody | None:
    """Cancel a subscription.

    Args:
        client: Sender used to dispatch the authenticated request.
        subscription_id: Subscription to cancel.
        reason: Optional reason recorded by PayPal.

    Returns:
        The decoded body, or None for the usual empty 204 response.

    """
    path = resource_path(SUBSCRIPTIONS_PATH, subscription_id, "cancel")
    response = await client.request(path, "POST", _status_change_options(reason))
    return decode_body(response)


async def activate_subscription(
    client: RequestSender,
    subscription_id: str,
    *,
    reason: str | None = None,
) -> JsonBody | None:
    """Activate a suspended subscription.

    Args:
        client: Sender used to dispatch the authenticated request.
        subscription_id: Subscription to activate.
        reason: Optional reason recorded by PayPal.

    Returns:
        The decoded body, or None for the usual empty 204 response.

    """
    path = resource_path(SUBSCRIPTIONS_PATH, subscription_id, "activate")
    response = await client.request(path, "POST", _status_change_options(reason))
    return decode_body(response)


async def list_subscription_transactions(
    client: RequestSender,
    subscription_id: str,
    start_time: str,
    end_time: str,
) -> list[dict[str, Any]]:
    """List the transactions of a subscription within a time window.

    Args:
        client: Sender used to dispatch the authenticated request.
        subscription_id: Subscription whose transactions are listed.
        start_time: ISO-8601 start of the window.
        end_time: ISO-8601 end of the window.

    Returns:
        The ``transactions`` array of the response.

    """
    path = resource_path(SUBSCRIPTIONS_PATH, subscription_id, "transactions")
    options = RequestOptions(params={"start_time": start_time, "end_time": end_time})
    response = await client.request(path, "GET", options)
    return extract_field(response, "transactions")


async def capture_payment(
    client: RequestSender,
    subscription_id: str,
    data: RequestBody,
) -> JsonBody | None:
    """Capture an outstanding balance on a subscription."""
    path = resource_path(SUBSCRIPTIONS_PATH, subscription_id, "capture")
    response = await client.request(path, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


__all__ = [
    "SUBSCRIPTIONS_PATH",
    "activate_subscription",
    "cancel_subscription",
    "capture_payment",
    "create_subscription",
    "get_subscription",
    "list_subscription_transactions",
]
