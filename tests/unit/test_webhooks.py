"""Unit tests for the notification webhooks operations."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from paypal_api.client.options import RequestOptions
from paypal_api.models import EventType, WebhookCreateOptions
from paypal_api.operations.webhooks import WEBHOOKS_PATH, create_webhook, delete_webhook, list_webhooks


def _sender(response: httpx.Response) -> MagicMock:
    """Provide a RequestSender-like mock returning the given response."""
    sender = MagicMock()
    sender.request = AsyncMock(return_value=response)
    return sender


@pytest.mark.asyncio
async def test_list_webhooks() -> None:
    """list_webhooks should return the webhooks array."""
    hooks = [{"id": "WH-1", "url": "https://example.com/hook"}]
    sender = _sender(httpx.Response(200, json={"webhooks": hooks}))

    assert await list_webhooks(sender) == hooks
    sender.request.assert_awaited_once_with(WEBHOOKS_PATH, "GET")


@pytest.mark.asyncio
async def test_create_webhook() -> None:
    """create_webhook should POST the url and event types."""
    created = {"id": "WH-2"}
    sender = _sender(httpx.Response(201, json=created))
    data = WebhookCreateOptions(
        url="https://example.com/hook",
        event_types=[EventType(name="BILLING.SUBSCRIPTION.ACTIVATED")],
    )

    assert await create_webhook(sender, data) == created
    sender.request.assert_awaited_once_with(
        WEBHOOKS_PATH,
        "POST",
        RequestOptions(
            json={
                "url": "https://example.com/hook",
                "event_types": [{"name": "BILLING.SUBSCRIPTION.ACTIVATED"}],
            },
        ),
    )


@pytest.mark.asyncio
async def test_delete_webhook() -> None:
    """delete_webhook should send DELETE to the webhook path and return None."""
    sender = _sender(httpx.Response(204))

    result = await delete_webhook(sender, "WH-1")

    assert result is None
    sender.request.assert_awaited_once_with(f"{WEBHOOKS_PATH}/WH-1", "DELETE")
