"""Unit tests for the catalog products operations."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from paypal_api.client.options import RequestOptions
from paypal_api.models import ProductCreateOptions
from paypal_api.operations.products import PRODUCTS_PATH, create_product, list_products


def _sender(response: httpx.Response) -> MagicMock:
    """Provide a RequestSender-like mock returning the given response."""
    sender = MagicMock()
    sender.request = AsyncMock(return_value=response)
    return sender


@pytest.mark.asyncio
async def test_list_products_default_pagination() -> None:
    """list_products should GET the first page of two with totals and return the products array."""
    products = [{"id": "PROD-1"}, {"id": "PROD-2"}]
    sender = _sender(httpx.Response(200, json={"products": products, "total_items": 5}))

    result = await list_products(sender)

    assert result == products
    sender.request.assert_awaited_once_with(
        PRODUCTS_PATH,
        "GET",
        RequestOptions(params={"page_size": "2", "page": "1", "total_required": "true"}),
    )


@pytest.mark.asyncio
async def test_list_products_custom_page() -> None:
    """Explicit page arguments should be forwarded as query parameters."""
    sender = _sender(httpx.Response(200, json={"products": []}))

    await list_products(sender, page_size=20, page=3)

    options: RequestOptions = sender.request.await_args.args[2]
    assert options.params == {"page_size": "20", "page": "3", "total_required": "true"}


@pytest.mark.asyncio
async def test_create_product_with_model() -> None:
    """create_product should POST the serialized model and return the decoded body."""
    created = {"id": "PROD-9", "name": "Gym membership"}
    sender = _sender(httpx.Response(201, json=created))

    result = await create_product(sender, ProductCreateOptions(name="Gym membership", type="SERVICE"))

    assert result == created
    sender.request.assert_awaited_once_with(
        PRODUCTS_PATH,
        "POST",
        RequestOptions(json={"name": "Gym membership", "type": "SERVICE"}),
    )


@pytest.mark.asyncio
async def test_create_product_propagates_http_error() -> None:
    """Transport errors from the sender should propagate unchanged."""
    sender = MagicMock()
    sender.request = AsyncMock(side_effect=httpx.ConnectError("down"))

    with pytest.raises(httpx.ConnectError, match="down"):
        await create_product(sender, {"name": "x"})
