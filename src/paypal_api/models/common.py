"""Pydantic models shared by several PayPal request bodies."""

from pydantic import BaseModel, ConfigDict


class Money(BaseModel):
    """A currency amount as PayPal expects it."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    currency_code: str
    """Three-letter ISO-4217 currency code."""

    value: str
    """Decimal amount kept as a string to preserve precision."""


__all__ = ["Money"]
