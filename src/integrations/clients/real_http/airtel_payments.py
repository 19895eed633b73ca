"""
Airtel Money merchant payments client.

Sends a single collection request (USSD push to the subscriber) per call and
hands the provider's body back untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import httpx

from src.integrations.clients.real_http.airtel_token import AirtelTokenManager
from src.integrations.contracts.payments import (
    PaymentRequest,
    build_payment_payload,
    generate_transaction_id,
    validate_payment_request,
)
from src.integrations.policy.response_wrappers import PaymentRequestError, extract_error_detail
from src.utils.config_loader import AirtelConfig, load_airtel_config

logger = logging.getLogger(__name__)

PAYMENTS_PATH = "/merchant/v1/payments/"


class AirtelPaymentsClient:
    def __init__(
        self,
        token_manager: Optional[AirtelTokenManager] = None,
        config: Optional[AirtelConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_seconds: Optional[float] = None,
        transaction_id_factory: Callable[[], str] = generate_transaction_id,
    ) -> None:
        self._config = config
        self.token_manager = token_manager or AirtelTokenManager(
            config=config,
            transport=transport,
            timeout_seconds=timeout_seconds,
        )
        self._transport = transport
        self._timeout_seconds = timeout_seconds
        self._transaction_id_factory = transaction_id_factory

    @property
    def config(self) -> AirtelConfig:
        return self._config if self._config is not None else load_airtel_config()

    def build_payload(self, request: PaymentRequest, config: Optional[AirtelConfig] = None) -> Dict[str, Any]:
        config = config or self.config
        return build_payment_payload(
            request,
            country=config.country,
            currency=config.currency,
            transaction_id=self._transaction_id_factory(),
        )

    async def initiate_payment(self, request: PaymentRequest) -> Any:
        """
        Push a payment request to Airtel Money.

        Raises:
            ValueError: a required request field is missing
            TokenAcquisitionError: no access token could be obtained
            PaymentRequestError: the payments endpoint failed or was unreachable
        """
        errors = validate_payment_request(request)
        if errors:
            raise ValueError("; ".join(errors))

        token = await self.token_manager.get_token()

        config = self.config
        url = config.url(PAYMENTS_PATH)
        payload = self.build_payload(request, config)
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        try:
            logger.info(
                "Initiating Airtel payment ref=%s txn=%s amount=%s %s",
                request.reference, payload["transaction"]["id"], request.amount, config.currency,
            )
            async with self._client() as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = extract_error_detail(e.response)
            logger.error("Payment failed: ref=%s status=%s detail=%s", request.reference, e.response.status_code, detail)
            raise PaymentRequestError(detail=detail) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Payment failed: ref=%s error=%s", request.reference, e)
            raise PaymentRequestError(detail=str(e)) from e

        logger.info("Airtel payment accepted: ref=%s status=%s", request.reference, response.status_code)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {"transport": self._transport}
        if self._timeout_seconds is not None:
            kwargs["timeout"] = self._timeout_seconds
        return httpx.AsyncClient(**kwargs)
