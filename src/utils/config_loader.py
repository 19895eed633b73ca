"""
Configuration loader for the Airtel Money integration
"""

import os
from typing import Optional
from pydantic import BaseModel, Field
import logging

logger = logging.getLogger(__name__)


class AirtelConfig(BaseModel):
    """Airtel Money API settings"""

    base_url: str = ""
    country: str = ""
    currency: str = ""
    client_id: str = ""
    client_secret: str = Field(default="", repr=False)

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"


class ServerConfig(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)


def load_airtel_config(environ: Optional[dict] = None) -> AirtelConfig:
    """
    Load Airtel Money settings from the environment

    Values are read on every call so that changes to the environment are
    picked up without restarting. Missing values are not rejected here; a
    missing base URL or credential shows up as a failed provider request.

    Args:
        environ: Mapping to read from. Defaults to os.environ

    Returns:
        AirtelConfig object
    """
    env = os.environ if environ is None else environ

    config = AirtelConfig(
        base_url=env.get("AIRTM_BASE_URL", "").strip(),
        country=env.get("AIRTM_COUNTRY", "").strip(),
        currency=env.get("AIRTM_CURRENCY", "").strip(),
        client_id=env.get("AIRTM_API_KEY", "").strip(),
        client_secret=env.get("AIRTM_API_SECRET", "").strip(),
    )
    if not config.base_url:
        logger.warning("AIRTM_BASE_URL is not set.")
    return config


def load_server_config(environ: Optional[dict] = None) -> ServerConfig:
    env = os.environ if environ is None else environ
    return ServerConfig(
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "5000")),
    )
