"""PayPal REST API client package.

This package contains an async client that authenticates with the OAuth2
client-credentials grant and exposes the catalog, billing, notification and
payout endpoints.
"""

# Intentionally do not re-export symbols from submodules, so a bare
# ``import paypal_api`` does not load dotenv. Importing ``paypal_api.config``
# (directly, or through ``paypal_api.client.paypal_client`` or ``paypal_api.cli``)
# reads a local .env file.

__all__: list[str] = []
