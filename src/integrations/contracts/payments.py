"""
Payment contracts.

Defines the structures exchanged with the Airtel Money merchant API:
- the caller's payment request
- the transaction block sent to the provider
- the cached bearer token held by the token manager

The provider payload is built here so that the HTTP client stays a thin
transport wrapper.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

TRANSACTION_ID_PREFIX = "TXN-"

Amount = Union[int, float]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


@dataclass
class PaymentRequest:
    phone_number: str
    amount: Amount
    reference: str


@dataclass
class PaymentTransaction:
    id: str
    amount: Amount
    country: str
    currency: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "country": self.country,
            "currency": self.currency,
            "id": self.id,
        }


@dataclass
class CachedToken:
    value: str
    expires_at: float                    # epoch seconds

    def is_valid(self, now: float) -> bool:
        return bool(self.value) and now < self.expires_at


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def generate_transaction_id(clock: Callable[[], float] = time.time) -> str:
    """Prefix plus the current time in milliseconds."""
    return f"{TRANSACTION_ID_PREFIX}{int(clock() * 1000)}"


def validate_payment_request(request: PaymentRequest) -> List[str]:
    """
    Return a list of validation errors.
    Only presence is checked; formats are left to the provider.
    """
    errors: List[str] = []

    if request.phone_number is None or request.phone_number == "":
        errors.append("phone_number is required")
    if request.amount is None:
        errors.append("amount is required")
    if request.reference is None or request.reference == "":
        errors.append("reference is required")

    return errors


def build_payment_payload(
    request: PaymentRequest,
    *,
    country: str,
    currency: str,
    transaction_id: Optional[str] = None,
) -> Dict[str, Any]:
    transaction = PaymentTransaction(
        id=transaction_id or generate_transaction_id(),
        amount=request.amount,
        country=country,
        currency=currency,
    )
    return {
        "reference": request.reference,
        "subscriber": {
            "country": country,
            "currency": currency,
            "msisdn": request.phone_number,
        },
        "transaction": transaction.to_payload(),
    }
