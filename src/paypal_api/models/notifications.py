"""Pydantic models for webhook registration bodies."""

from pydantic import BaseModel, ConfigDict


class EventType(BaseModel):
    """An event name a webhook subscribes to, e.g. ``BILLING.SUBSCRIPTION.CREATED``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str


class WebhookCreateOptions(BaseModel):
    """Body for ``POST /v1/notifications/webhooks``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    url: str | None = None
    """HTTPS listener that receives the event notifications."""

    event_types: list[EventType] | None = None


__all__ = ["EventType", "WebhookCreateOptions"]
