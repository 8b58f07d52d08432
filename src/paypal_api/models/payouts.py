"""Pydantic models for batch payout bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .common import Money

RecipientType = Literal["EMAIL", "PHONE", "PAYPAL_ID"]


class SenderBatchHeader(BaseModel):
    """Batch-level settings of a payout request."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sender_batch_id: str | None = None
    """Caller-chosen ID; PayPal rejects a batch ID reused within 30 days."""

    email_subject: str | None = None
    email_message: str | None = None
    recipient_type: RecipientType | None = None


class PayoutItem(BaseModel):
    """A single payment within a payout batch."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    recipient_type: RecipientType | None = None
    amount: Money
    receiver: str
    note: str | None = None
    sender_item_id: str | None = None
    recipient_wallet: str | None = None


class PayoutCreateOptions(BaseModel):
    """Body for ``POST /v1/payments/payouts``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sender_batch_header: SenderBatchHeader | None = None
    items: list[PayoutItem] | None = None


__all__ = ["PayoutCreateOptions", "PayoutItem", "RecipientType", "SenderBatchHeader"]
