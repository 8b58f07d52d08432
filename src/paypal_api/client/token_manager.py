"""Token management utilities for the PayPal REST API."""

from __future__ import annotations

import asyncio
import base64
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import httpx

from ..config import PayPalConfig

logger = logging.getLogger("paypal_api.token_manager")

TOKEN_PATH = "/v1/oauth2/token"

# Lifetime assumed when the token response omits expires_in
DEFAULT_EXPIRES_IN = 3600


def now_ms() -> int:
    """Return the current instant as epoch milliseconds."""
    return int(datetime.now(UTC).timestamp() * 1000)


@dataclass(frozen=True, slots=True)
class AccessToken:
    """A bearer token and the absolute instant it stops being valid.

    Attributes:
        value: Opaque token string issued by PayPal.
        expires_at: Expiry as epoch milliseconds.

    """

    value: str
    expires_at: int

    def is_expired(self, at_ms: int | None = None) -> bool:
        """Return True once the expiry instant has been reached."""
        current = now_ms() if at_ms is None else at_ms
        return self.expires_at <= current


class TokenManager:
    """Manage bearer tokens for the PayPal API, refreshing when necessary.

    At most one token request is outstanding at a time. Callers that find the
    token missing or expired while a request is running wait on that same
    request instead of issuing their own.
    """

    def __init__(self, config: PayPalConfig, http_client: httpx.AsyncClient) -> None:
        """Initialize the token manager.

        Args:
            config: Credentials and environment used for the client-credentials grant.
            http_client: Transport used to reach the token endpoint.

        """
        self._config = config
        self._http_client = http_client
        self._token: AccessToken | None = None
        self._pending: asyncio.Task[AccessToken] | None = None

    @property
    def token(self) -> AccessToken | None:
        """Return the cached token, if any."""
        return self._token

    @property
    def refresh_in_flight(self) -> bool:
        """Return True while a token request is running."""
        return self._pending is not None and not self._pending.done()

    def _basic_auth_header(self) -> str:
        credentials = f"{self._config.client_id}:{self._config.client_secret}"
        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    async def get_token(self) -> str:
        """Return a valid bearer token value, refreshing if needed."""
        if self._pending is not None and not self._pending.done():
            await asyncio.shield(self._pending)
        token = self._token
        if token is None or token.is_expired():
            token = await self.fetch_token()
        return token.value

    async def fetch_token(self) -> AccessToken:
        """Request a new token, joining the in-flight request if there is one.

        Returns:
            The freshly issued token.

        Raises:
            httpx.HTTPError: If the token endpoint is unreachable or rejects the credentials.
            RuntimeError: If the response carries no access token.

        """
        task = self._pending
        if task is None or task.done():
            task = asyncio.ensure_future(self._fetch_and_cache_token())
            task.add_done_callback(self._clear_pending)
            self._pending = task
        # Shielded so one cancelled waiter does not abort the shared request
        return await asyncio.shield(task)

    def _clear_pending(self, task: asyncio.Task[AccessToken]) -> None:
        if self._pending is task:
            self._pending = None
        if not task.cancelled():
            # Mark the failure as retrieved; every waiter still receives it
            task.exception()

    async def _fetch_and_cache_token(self) -> AccessToken:
        """Authenticate with PayPal and cache the returned bearer token."""
        try:
            payload = await self._request_token()
        except Exception:
            logger.exception("Failed to obtain a PayPal access token")
            raise

        value = payload.get("access_token")
        if not value:
            msg = "PayPal token endpoint responded without an access_token."
            logger.error(msg)
            raise RuntimeError(msg)

        expires_in = payload.get("expires_in")
        if expires_in is None:
            logger.warning("PayPal token response has no expires_in; assuming %s seconds.", DEFAULT_EXPIRES_IN)
            expires_in = DEFAULT_EXPIRES_IN
        expires_in = int(expires_in)
        token = AccessToken(value=value, expires_at=now_ms() + expires_in * 1000)
        self._token = token

        logger.debug("Fetched new PayPal access token valid for %s seconds.", expires_in)
        return token

    async def _request_token(self) -> dict[str, Any]:
        """POST the client-credentials grant and return the decoded response body."""
        response = await self._http_client.post(
            f"{self._config.base_url}{TOKEN_PATH}",
            headers={
                "Accept": "application/json",
                "Accept-Language": "en_US",
                "Authorization": self._basic_auth_header(),
            },
            data={"grant_type": "client_credentials"},
        )
        response.raise_for_status()
        return response.json()


__all__ = ["DEFAULT_EXPIRES_IN", "TOKEN_PATH", "AccessToken", "TokenManager", "now_ms"]
