"""
Real HTTP integration clients.

These clients talk to the Airtel Money Open API:
- airtel_token: OAuth2 client-credentials tokens, cached until shortly before expiry
- airtel_payments: merchant collection requests (USSD push)

Important:
- Keep these modules as the ONLY place where Airtel HTTP calls are made.
- Return provider bodies as received; callers decide how to present them.
"""

from .airtel_payments import AirtelPaymentsClient
from .airtel_token import AirtelTokenManager, TokenCache

__all__ = ["AirtelPaymentsClient", "AirtelTokenManager", "TokenCache"]
