"""Helpers for the notification webhooks endpoints."""

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

logger = logging.getLogger("paypal_api.operations.webhooks")

WEBHOOKS_PATH = "/v1/notifications/webhooks"


async def list_webhooks(client: RequestSender) -> list[dict[str, Any]]:
    """Return the ``webhooks`` array of all webhooks registered for the app."""
    response = await client.request(WEBHOOKS_PATH, "GET")
    return extract_field(response, "webhooks")


async def create_webhook(client: RequestSender, data: RequestBody) -> JsonBody:
    """Register a webhook listener and return the created webhook."""
    response = await client.request(WEBHOOKS_PATH, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


async def delete_webhook(client: RequestSender, webhook_id: str) -> None:
    """Delete a webhook; PayPal answers with an empty 204."""
    await client.request(resource_path(WEBHOOKS_PATH, webhook_id), "DELETE")
    logger.debug("Deleted webhook %s.", webhook_id)


__all__ = ["WEBHOOKS_PATH", "create_webhook", "delete_webhook", "list_webhooks"]
