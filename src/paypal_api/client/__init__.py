"""Client package for the PayPal REST API.

Provides the HTTP client and token management:
- ``paypal_client``: ``PayPalClient``, the authenticated request dispatcher and resource methods
- ``token_manager``: Bearer token lifecycle management with a single shared refresh
- ``options``: ``RequestOptions``, the explicit per-request overrides
"""
