import logging
from typing import Optional

from dotenv import load_dotenv

from src.integrations.clients.real_http.airtel_payments import AirtelPaymentsClient

load_dotenv()

logger = logging.getLogger(__name__)

# One client per process so every request shares the same token cache.
_payments_client: Optional[AirtelPaymentsClient] = None


def get_payments_client() -> AirtelPaymentsClient:
    global _payments_client
    if _payments_client is None:
        logger.info("Creating Airtel payments client")
        _payments_client = AirtelPaymentsClient()
    return _payments_client


def reset_payments_client() -> None:
    global _payments_client
    _payments_client = None
