"""Configuration management for the PayPal API client.

This module defines the ``PayPalConfig`` model and a helper to load it from
environment variables. Configuration is immutable once constructed.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Load variables from a local .env file for development convenience
load_dotenv()

SANDBOX_BASE_URL = "https://api-m.sandbox.paypal.com"
PRODUCTION_BASE_URL = "https://api-m.paypal.com"


class PayPalConfig(BaseModel):
    """Credentials and environment selection for a PayPal REST account."""

    model_config = ConfigDict(frozen=True)

    sandbox_mode: bool = True
    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1, repr=False)
    timeout_ms: int = Field(default=10000, ge=1000, le=600000)

    @property
    def base_url(self) -> str:
        """Return the REST host for the selected environment."""
        return SANDBOX_BASE_URL if self.sandbox_mode else PRODUCTION_BASE_URL

    @classmethod
    def from_env(cls) -> PayPalConfig:
        """Build a configuration object from environment variables."""
        client_id = os.getenv("PAYPAL_CLIENT_ID")
        client_secret = os.getenv("PAYPAL_CLIENT_SECRET")
        if not (client_id and client_secret):
            msg = "PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET are required to authenticate with PayPal."
            raise RuntimeError(msg)
        raw_config: dict[str, Any] = {
            "client_id": client_id,
            "client_secret": client_secret,
        }
        # Unset values fall back to the model defaults
        sandbox_mode = os.getenv("PAYPAL_SANDBOX_MODE")
        if sandbox_mode is not None:
            raw_config["sandbox_mode"] = sandbox_mode
        timeout_ms = os.getenv("PAYPAL_TIMEOUT_MS")
        if timeout_ms is not None:
            raw_config["timeout_ms"] = timeout_ms
        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid PayPal configuration: {messages}"
            raise RuntimeError(msg) from exc


__all__ = ["PRODUCTION_BASE_URL", "SANDBOX_BASE_URL", "PayPalConfig"]
