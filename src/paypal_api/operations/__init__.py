"""Resource operations for the PayPal REST API.

Each module wraps one endpoint family as plain async functions that take a
``RequestSender`` (normally a ``PayPalClient``):
- ``common``: Shared utilities, type aliases, and the sender protocol
- ``products``: Catalog product listing and creation
- ``plans``: Billing plan listing and creation
- ``subscriptions``: Subscription lifecycle, transactions, and captures
- ``webhooks``: Webhook listener registration
- ``payouts``: Batch payouts
"""
