"""Pydantic models for billing plan and subscription request bodies.

These cover the fields of the ``/v1/billing`` endpoints that callers set most
often. All models allow extra fields, so anything PayPal accepts but is not
listed here can still be supplied.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .common import Money

IntervalUnit = Literal["DAY", "WEEK", "MONTH", "YEAR"]
TenureType = Literal["REGULAR", "TRIAL"]
PlanStatus = Literal["CREATED", "INACTIVE", "ACTIVE"]


# =============================================================================
# Plans
# =============================================================================


class Frequency(BaseModel):
    """How often a billing cycle repeats."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    interval_unit: IntervalUnit
    interval_count: int = 1


class PricingScheme(BaseModel):
    """Price charged for one billing cycle."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    fixed_price: Money | None = None


class BillingCycle(BaseModel):
    """One trial or regular billing cycle of a plan."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    frequency: Frequency
    tenure_type: TenureType
    sequence: int
    """Order in which this cycle runs among the plan's cycles (1-based)."""

    total_cycles: int = 0
    """Number of times the cycle runs; 0 means until cancelled."""

    pricing_scheme: PricingScheme | None = None


class PaymentPreferences(BaseModel):
    """Plan-level handling of setup fees and failed payments."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    auto_bill_outstanding: bool | None = None
    setup_fee: Money | None = None
    setup_fee_failure_action: Literal["CONTINUE", "CANCEL"] | None = None
    payment_failure_threshold: int | None = None


class Taxes(BaseModel):
    """Tax rate applied to a plan."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    percentage: str
    inclusive: bool = True


class PlanCreateOptions(BaseModel):
    """Body for ``POST /v1/billing/plans``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    product_id: str | None = None
    name: str | None = None
    status: PlanStatus | None = None
    description: str | None = None
    billing_cycles: list[BillingCycle] | None = None
    payment_preferences: PaymentPreferences | None = None
    taxes: Taxes | None = None
    quantity_supported: bool | None = None


# =============================================================================
# Subscriptions
# =============================================================================


class SubscriberName(BaseModel):
    """Name of the subscribing payer."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    given_name: str | None = None
    surname: str | None = None


class Subscriber(BaseModel):
    """Payer details attached to a new subscription."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: SubscriberName | None = None
    email_address: str | None = None
    payer_id: str | None = None


class ApplicationContext(BaseModel):
    """Checkout experience settings for subscription approval."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    brand_name: str | None = None
    locale: str | None = None
    shipping_preference: Literal["GET_FROM_FILE", "NO_SHIPPING", "SET_PROVIDED_ADDRESS"] | None = None
    user_action: Literal["CONTINUE", "SUBSCRIBE_NOW"] | None = None
    return_url: str | None = None
    cancel_url: str | None = None


class SubscriptionCreateOptions(BaseModel):
    """Body for ``POST /v1/billing/subscriptions``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    plan_id: str | None = None
    start_time: str | None = None
    """ISO-8601 instant; PayPal starts immediately when omitted."""

    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    application_context: ApplicationContext | None = None
    custom_id: str | None = None


class CapturePaymentOptions(BaseModel):
    """Body for ``POST /v1/billing/subscriptions/{id}/capture``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    note: str
    capture_type: Literal["OUTSTANDING_BALANCE"] = "OUTSTANDING_BALANCE"
    amount: Money


__all__ = [
    "ApplicationContext",
    "BillingCycle",
    "CapturePaymentOptions",
    "Frequency",
    "IntervalUnit",
    "PaymentPreferences",
    "PlanCreateOptions",
    "PlanStatus",
    "PricingScheme",
    "Subscriber",
    "SubscriberName",
    "SubscriptionCreateOptions",
    "Taxes",
    "TenureType",
]
