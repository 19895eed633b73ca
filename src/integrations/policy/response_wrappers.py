from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class AirtelIntegrationError(RuntimeError):
    """
    Base error for Airtel Money calls.

    The message is safe to show to API callers. ``detail`` carries whatever the
    provider returned and is only meant for logs.
    """

    default_message = "Airtel Money request failed"

    def __init__(self, message: Optional[str] = None, *, detail: Any = None) -> None:
        super().__init__(message or self.default_message)
        self.detail = detail


class TokenAcquisitionError(AirtelIntegrationError):
    default_message = "Token request failed"


class PaymentRequestError(AirtelIntegrationError):
    default_message = "Payment request failed"


class AccessTokenResponseModel(BaseModel):
    access_token: str = Field(min_length=1)
    expires_in: float
    raw: Dict[str, Any] = Field(default_factory=dict)


def normalize_token_response(raw: Any) -> AccessTokenResponseModel:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Token response must be a JSON object; got {type(raw).__name__}.")

    return _build_model(
        AccessTokenResponseModel,
        {
            "access_token": raw.get("access_token"),
            "expires_in": raw.get("expires_in"),
            "raw": raw,
        },
        raw,
    )


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc


def extract_error_detail(response: httpx.Response) -> Any:
    """Provider error body as JSON when possible, else its text."""
    try:
        return response.json()
    except ValueError:
        return response.text or response.reason_phrase
