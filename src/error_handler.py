"""Error handling helpers for the payments API."""
from typing import Any, Dict
import logging

from src.integrations.policy.response_wrappers import AirtelIntegrationError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred while processing your request. Please try again later."


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Build the body returned to API callers.

        Airtel errors already carry a caller-safe message. Anything else is
        reduced to a generic one. Provider detail only goes to the log.
        """
        if isinstance(exc, AirtelIntegrationError):
            logger.error(
                "Airtel integration failure (%s): %s context=%s",
                type(exc).__name__, exc.detail, context or {},
            )
            return {"error": str(exc)}

        logger.error("Unhandled exception in payments API: %s context=%s", exc, context or {}, exc_info=True)
        return {"error": GENERIC_ERROR_MESSAGE}
