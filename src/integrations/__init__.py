"""
Integrations layer.
This package contains all code used to communicate with Airtel Money:
- OAuth2 access tokens for the Open API
- Merchant payment (collection) requests

Key rule:
- API endpoints MUST NOT call Airtel directly.
- Endpoints should call integration clients (under src/integrations/clients).

Wiring:
- The client instance shared by requests is built in ONE place (src/api/dependencies.py).
"""

from .contracts.payments import (
    CachedToken,
    PaymentRequest,
    PaymentTransaction,
    build_payment_payload,
    generate_transaction_id,
    validate_payment_request,
)
from .policy.response_wrappers import (
    AirtelIntegrationError,
    IntegrationResponseError,
    PaymentRequestError,
    TokenAcquisitionError,
)

__all__ = [
    # contracts
    "CachedToken", "PaymentRequest", "PaymentTransaction",
    "build_payment_payload", "generate_transaction_id", "validate_payment_request",
    # errors
    "AirtelIntegrationError", "IntegrationResponseError",
    "PaymentRequestError", "TokenAcquisitionError",
]
