"""PayPal REST client setup and request dispatch.

``PayPalClient`` owns one ``httpx.AsyncClient`` and one ``TokenManager``.
Every resource method goes through ``request``, which makes sure a valid
bearer token is available before the call is sent.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Any, Self

import httpx

from ..config import PayPalConfig
from ..operations import payouts, plans, products, subscriptions, webhooks
from ..operations.common import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, JsonBody, RequestBody
from .options import RequestOptions
from .token_manager import AccessToken, TokenManager

logger = logging.getLogger("paypal_api.client")


def create_http_client(config: PayPalConfig) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the configured timeout.

    Args:
        config: The configuration providing the request timeout.

    Returns:
        A new async HTTP client. The caller is responsible for closing it.

    """
    timeout = httpx.Timeout(config.timeout_ms / 1000)
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"Accept": "application/json"},
    )


class PayPalClient:
    """Authenticated client for the PayPal REST API."""

    def __init__(
        self,
        config: PayPalConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Credentials and environment selection.
            http_client: Optional transport to use instead of a client-owned one.
                A supplied client is not closed by ``aclose``.

        """
        self.config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client(config)
        self.token_manager = TokenManager(config, self._http_client)

    @classmethod
    def from_credentials(cls, *, sandbox_mode: bool, client_id: str, client_secret: str) -> Self:
        """Build a client directly from an environment flag and credential pair."""
        config = PayPalConfig(sandbox_mode=sandbox_mode, client_id=client_id, client_secret=client_secret)
        return cls(config)

    @property
    def sandbox_mode(self) -> bool:
        """Return True when the client talks to the sandbox environment."""
        return self.config.sandbox_mode

    @property
    def base_url(self) -> str:
        """Return the REST host used for every request."""
        return self.config.base_url

    @property
    def access_token(self) -> AccessToken | None:
        """Return the currently cached token, if any."""
        return self.token_manager.token

    async def __aenter__(self) -> Self:
        """Return the client for ``async with`` usage."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the owned HTTP client when leaving an ``async with`` block."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it. Safe to call repeatedly."""
        if self._owns_http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def fetch_token(self) -> AccessToken:
        """Obtain a fresh token, sharing any request already in flight."""
        return await self.token_manager.fetch_token()

    async def request(
        self,
        path: str,
        method: str = "GET",
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        """Send an authenticated request and return the raw response.

        Waits for an in-flight token refresh, refreshes a missing or expired
        token, then sends the call with ``Authorization: Bearer <token>``.

        Args:
            path: Endpoint path relative to the base URL, e.g. ``/v1/catalogs/products``.
            method: HTTP method.
            options: Query, body, and extra headers for this call.

        Returns:
            The raw ``httpx.Response`` for a 2xx status.

        Raises:
            httpx.HTTPStatusError: If PayPal answers with a non-2xx status.
            httpx.HTTPError: On network failures, including during token refresh.

        """
        opts = options or RequestOptions()
        token = await self.token_manager.get_token()
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        response = await self._http_client.request(
            method,
            url,
            params=opts.params,
            json=opts.json,
            headers=opts.build_headers(token),
        )
        response.raise_for_status()
        return response

    # -------------------------------------------------------------------------
    # Catalog products
    # -------------------------------------------------------------------------

    async def list_products(
        self,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> list[dict[str, Any]]:
        """Return one page of catalog products."""
        return await products.list_products(self, page_size=page_size, page=page)

    async def create_product(self, data: RequestBody) -> JsonBody:
        """Create a catalog product."""
        return await products.create_product(self, data)

    # -------------------------------------------------------------------------
    # Billing plans
    # -------------------------------------------------------------------------

    async def list_plans(
        self,
        product_id: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> list[dict[str, Any]]:
        """Return one page of billing plans for a product."""
        return await plans.list_plans(self, product_id, page_size=page_size, page=page)

    async def create_plan(self, data: RequestBody) -> JsonBody:
        """Create a billing plan."""
        return await plans.create_plan(self, data)

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    async def create_subscription(self, data: RequestBody) -> JsonBody:
        """Create a subscription."""
        return await subscriptions.create_subscription(self, data)

    async def get_subscription(self, subscription_id: str) -> JsonBody:
        """Return the details of one subscription."""
        return await subscriptions.get_subscription(self, subscription_id)

    async def cancel_subscription(self, subscription_id: str, *, reason: str | None = None) -> JsonBody | None:
        """Cancel a subscription."""
        return await subscriptions.cancel_subscription(self, subscription_id, reason=reason)

    async def activate_subscription(self, subscription_id: str, *, reason: str | None = None) -> JsonBody | None:
        """Activate a suspended subscription."""
        return await subscriptions.activate_subscription(self, subscription_id, reason=reason)

    async def list_subscription_transactions(
        self,
        subscription_id: str,
        start_time: str,
        end_time: str,
    ) -> list[dict[str, Any]]:
        """Return the transactions of a subscription between two ISO-8601 instants."""
        return await subscriptions.list_subscription_transactions(self, subscription_id, start_time, end_time)

    async def capture_payment(self, subscription_id: str, data: RequestBody) -> JsonBody | None:
        """Capture an outstanding subscription balance."""
        return await subscriptions.capture_payment(self, subscription_id, data)

    # -------------------------------------------------------------------------
    # Webhooks
    # -------------------------------------------------------------------------

    async def list_webhooks(self) -> list[dict[str, Any]]:
        """Return all registered webhooks."""
        return await webhooks.list_webhooks(self)

    async def create_webhook(self, data: RequestBody) -> JsonBody:
        """Register a webhook listener."""
        return await webhooks.create_webhook(self, data)

    async def delete_webhook(self, webhook_id: str) -> None:
        """Delete a webhook listener."""
        await webhooks.delete_webhook(self, webhook_id)

    # -------------------------------------------------------------------------
    # Payouts
    # -------------------------------------------------------------------------

    async def create_payout(self, data: RequestBody) -> JsonBody:
        """Submit a payout batch."""
        return await payouts.create_payout(self, data)


@asynccontextmanager
async def open_client(config: PayPalConfig) -> AsyncIterator[PayPalClient]:
    """Yield a ``PayPalClient`` whose HTTP transport is closed on exit.

    Args:
        config: Credentials and environment selection.

    Yields:
        Configured PayPalClient instance.

    """
    async with PayPalClient(config) as client:
        yield client


__all__ = ["PayPalClient", "create_http_client", "open_client"]
