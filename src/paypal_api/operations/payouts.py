"""Helpers for the batch payouts endpoint."""

from ..client.options import RequestOptions
from .common import JsonBody, RequestBody, RequestSender, decode_body, serialize_body

PAYOUTS_PATH = "/v1/payments/payouts"


async def create_payout(client: RequestSender, data: RequestBody) -> JsonBody:
    """Submit a payout batch and return PayPal's batch header response."""
    response = await client.request(PAYOUTS_PATH, "POST", RequestOptions(json=serialize_body(data)))
    return decode_body(response)


__all__ = ["PAYOUTS_PATH", "create_payout"]
