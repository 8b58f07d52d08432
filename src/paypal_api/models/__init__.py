"""Pydantic models for PayPal request bodies.

The create operations accept either these models or plain mappings. Models
give type-checked construction; responses are returned as decoded JSON.
"""

from .billing import (
    ApplicationContext,
    BillingCycle,
    CapturePaymentOptions,
    Frequency,
    PaymentPreferences,
    PlanCreateOptions,
    PricingScheme,
    Subscriber,
    SubscriberName,
    SubscriptionCreateOptions,
    Taxes,
)
from .catalog import ProductCreateOptions
from .common import Money
from .notifications import EventType, WebhookCreateOptions
from .payouts import PayoutCreateOptions, PayoutItem, SenderBatchHeader

__all__ = [
    "ApplicationContext",
    "BillingCycle",
    "CapturePaymentOptions",
    "EventType",
    "Frequency",
    "Money",
    "PaymentPreferences",
    "PayoutCreateOptions",
    "PayoutItem",
    "PlanCreateOptions",
    "PricingScheme",
    "ProductCreateOptions",
    "SenderBatchHeader",
    "Subscriber",
    "SubscriberName",
    "SubscriptionCreateOptions",
    "Taxes",
    "WebhookCreateOptions",
]
