"""Per-request overrides accepted by ``PayPalClient.request``."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Supported overrides for a single API call.

    Header precedence, lowest to highest: client defaults, ``headers`` given
    here, then the injected ``Authorization: Bearer`` header, which always wins.

    Attributes:
        params: Query string parameters, encoded in insertion order.
        json: Request body, sent as JSON when not None.
        headers: Extra headers for this call only.

    """

    params: Mapping[str, str] | None = None
    json: Any = None
    headers: Mapping[str, str] | None = None

    def build_headers(self, bearer_token: str) -> httpx.Headers:
        """Merge caller headers with the bearer credential.

        ``httpx.Headers`` is case-insensitive, so a caller-supplied
        ``authorization`` in any casing is replaced rather than duplicated.
        """
        headers = httpx.Headers(self.headers or {})
        headers["Authorization"] = f"Bearer {bearer_token}"
        return headers


__all__ = ["RequestOptions"]
