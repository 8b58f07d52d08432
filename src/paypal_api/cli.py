"""Command-line entry point for read-only PayPal queries.

Subcommands:
- ``products``: list catalog products
- ``plans``: list billing plans of a product
- ``subscription``: show one subscription
- ``webhooks``: list registered webhooks

Credentials come from ``PAYPAL_*`` environment variables (or a local ``.env``).
Results are printed to stdout as JSON.
"""

import argparse
import asyncio
import json
import logging
import os
import signal
import sys
from collections.abc import Sequence
from typing import Any

import httpx

from .client.paypal_client import PayPalClient
from .config import PayPalConfig

logger = logging.getLogger("paypal_api.cli")


def _configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``paypal-api`` console script."""
    parser = argparse.ArgumentParser(
        prog="paypal-api",
        description="Query a PayPal REST account using client credentials.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    products_parser = subparsers.add_parser("products", help="List catalog products")
    products_parser.add_argument("--page-size", type=int, default=2)
    products_parser.add_argument("--page", type=int, default=1)

    plans_parser = subparsers.add_parser("plans", help="List billing plans of a product")
    plans_parser.add_argument("--product-id", required=True)
    plans_parser.add_argument("--page-size", type=int, default=2)
    plans_parser.add_argument("--page", type=int, default=1)

    subscription_parser = subparsers.add_parser("subscription", help="Show one subscription")
    subscription_parser.add_argument("subscription_id")

    subparsers.add_parser("webhooks", help="List registered webhooks")
    return parser


async def run_command(client: PayPalClient, args: argparse.Namespace) -> Any:
    """Dispatch the parsed subcommand against the client and return its result."""
    match args.command:
        case "products":
            return await client.list_products(page_size=args.page_size, page=args.page)
        case "plans":
            return await client.list_plans(args.product_id, page_size=args.page_size, page=args.page)
        case "subscription":
            return await client.get_subscription(args.subscription_id)
        case "webhooks":
            return await client.list_webhooks()
    msg = f"Unknown command: {args.command}"
    raise ValueError(msg)


async def _run(config: PayPalConfig, args: argparse.Namespace) -> Any:
    async with PayPalClient(config) as client:
        return await run_command(client, args)


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the paypal-api console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    _configure_logging()
    args = build_parser().parse_args(argv)

    try:
        config = PayPalConfig.from_env()
        result = asyncio.run(_run(config, args))
    except httpx.HTTPStatusError as exc:
        logger.error("PayPal responded with %s: %s", exc.response.status_code, exc.response.text)  # noqa: TRY400
        return 1
    except (httpx.HTTPError, RuntimeError) as exc:
        logger.error("%s", exc)  # noqa: TRY400
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
