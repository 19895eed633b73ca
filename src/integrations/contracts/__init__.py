"""
Contracts (data models).

This folder defines the request/response shapes for the Airtel Money integration:
- the payment request accepted from API callers
- the transaction block and envelope sent to the provider
- the cached access token

Both the HTTP clients and the tests rely on these models instead of ad-hoc dicts.
"""
