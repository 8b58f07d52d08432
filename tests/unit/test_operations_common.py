"""Unit tests for shared operations helpers."""

import httpx
import pytest

from paypal_api.models import Money, ProductCreateOptions
from paypal_api.operations.common import (
    decode_body,
    extract_field,
    pagination_params,
    resource_path,
    serialize_body,
)


class TestResourcePath:
    """Tests for resource_path."""

    def test_appends_segments(self) -> None:
        """Segments should be appended in order."""
        assert resource_path("/v1/billing/subscriptions", "I-123", "cancel") == "/v1/billing/subscriptions/I-123/cancel"

    def test_quotes_identifiers(self) -> None:
        """Identifiers should not be able to inject path separators or queries."""
        assert resource_path("/v1/notifications/webhooks", "a/b?c") == "/v1/notifications/webhooks/a%2Fb%3Fc"

    def test_strips_trailing_slash(self) -> None:
        """A trailing slash on the base should not produce a double slash."""
        assert resource_path("/v1/billing/plans/", "P-1") == "/v1/billing/plans/P-1"


def test_pagination_params_order_and_values() -> None:
    """Pagination parameters should be strings in page_size, page, total_required order."""
    params = pagination_params(page_size=2, page=1)
    assert list(params.items()) == [("page_size", "2"), ("page", "1"), ("total_required", "true")]


class TestSerializeBody:
    """Tests for serialize_body."""

    def test_model_excludes_unset_fields(self) -> None:
        """Models should dump without None fields."""
        body = serialize_body(ProductCreateOptions(name="Video Streaming", type="SERVICE"))
        assert body == {"name": "Video Streaming", "type": "SERVICE"}

    def test_model_keeps_extra_fields(self) -> None:
        """Extra fields accepted by a model should be passed through."""
        body = serialize_body(ProductCreateOptions(name="x", custom_flag=True))  # type: ignore[call-arg]
        assert body == {"name": "x", "custom_flag": True}

    def test_mapping_copied(self) -> None:
        """Mappings should be copied rather than passed by reference."""
        data = {"amount": Money(currency_code="USD", value="1.00").model_dump()}
        body = serialize_body(data)
        assert body == data
        assert body is not data


class TestDecodeBody:
    """Tests for decode_body and extract_field."""

    def test_empty_body_is_none(self) -> None:
        """A 204 without content should decode to None."""
        assert decode_body(httpx.Response(204)) is None

    def test_json_body_decoded(self) -> None:
        """A JSON body should be decoded."""
        assert decode_body(httpx.Response(200, json={"id": "P-1"})) == {"id": "P-1"}

    def test_invalid_json_raises(self) -> None:
        """A non-JSON body should raise rather than be silently dropped."""
        with pytest.raises(ValueError):
            decode_body(httpx.Response(200, content=b"<html>"))

    def test_extract_field_present(self) -> None:
        """The named top-level field should be returned."""
        response = httpx.Response(200, json={"products": [{"id": "PROD-1"}], "total_items": 1})
        assert extract_field(response, "products") == [{"id": "PROD-1"}]

    def test_extract_field_missing(self) -> None:
        """A missing field should yield an empty list."""
        assert extract_field(httpx.Response(200, json={"total_items": 0}), "products") == []

    def test_extract_field_empty_body(self) -> None:
        """An empty body should yield an empty list."""
        assert extract_field(httpx.Response(204), "webhooks") == []
