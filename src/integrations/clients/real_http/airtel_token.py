"""
Airtel Money OAuth2 token client.

Fetches bearer tokens with the client-credentials grant and keeps the current
one in a TokenCache until shortly before the provider expires it.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

import httpx

from src.integrations.contracts.payments import CachedToken
from src.integrations.policy.response_wrappers import (
    TokenAcquisitionError,
    extract_error_detail,
    normalize_token_response,
)
from src.utils.config_loader import AirtelConfig, load_airtel_config

logger = logging.getLogger(__name__)

TOKEN_PATH = "/auth/oauth2/token"
EXPIRY_SAFETY_MARGIN_SECONDS = 60


class TokenCache:
    """Single slot holding the last token fetched by one AirtelTokenManager."""

    def __init__(self) -> None:
        self._token: Optional[CachedToken] = None

    @property
    def token(self) -> Optional[CachedToken]:
        return self._token

    def get(self, now: float) -> Optional[str]:
        if self._token is not None and self._token.is_valid(now):
            return self._token.value
        return None

    def store(self, value: str, expires_at: float) -> None:
        self._token = CachedToken(value=value, expires_at=expires_at)

    def clear(self) -> None:
        self._token = None


class AirtelTokenManager:
    def __init__(
        self,
        config: Optional[AirtelConfig] = None,
        cache: Optional[TokenCache] = None,
        clock: Callable[[], float] = time.time,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        # None means "read the environment on every call".
        self._config = config
        self.cache = cache if cache is not None else TokenCache()
        self._clock = clock
        self._transport = transport
        self._timeout_seconds = timeout_seconds
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def config(self) -> AirtelConfig:
        return self._config if self._config is not None else load_airtel_config()

    async def get_token(self) -> str:
        """
        Return a bearer token, fetching a new one only when the cached one has expired.
        Raises TokenAcquisitionError when the provider cannot issue one.
        """
        cached = self.cache.get(self._clock())
        if cached is not None:
            return cached

        async with self._refresh_lock():
            # Another task may have refreshed the token while we waited.
            now = self._clock()
            cached = self.cache.get(now)
            if cached is not None:
                return cached
            return await self._fetch_token(now)

    def _refresh_lock(self) -> asyncio.Lock:
        # asyncio locks belong to one event loop; the client may outlive it.
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _fetch_token(self, now: float) -> str:
        config = self.config
        url = config.url(TOKEN_PATH)
        credentials = {
            "client_id": config.client_id,
            "client_secret": config.client_secret,
            "grant_type": "client_credentials",
        }

        try:
            logger.info("Requesting Airtel access token from %s", url)
            async with self._client() as client:
                response = await client.post(url, json=credentials, headers={"Content-Type": "application/json"})
                response.raise_for_status()
                token = normalize_token_response(response.json())
        except httpx.HTTPStatusError as e:
            detail = extract_error_detail(e.response)
            logger.error("Failed to fetch access token: %s %s", e.response.status_code, detail)
            raise TokenAcquisitionError(detail=detail) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Failed to fetch access token: %s", e)
            raise TokenAcquisitionError(detail=str(e)) from e
        except ValueError as e:
            # IntegrationResponseError or a body that is not JSON
            logger.error("Failed to fetch access token: malformed response: %s", e)
            raise TokenAcquisitionError(detail=str(e)) from e

        expires_at = now + (token.expires_in - EXPIRY_SAFETY_MARGIN_SECONDS)
        self.cache.store(token.access_token, expires_at)
        logger.info("Cached Airtel access token (expires_in=%ss)", token.expires_in)
        return token.access_token

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict = {"transport": self._transport}
        if self._timeout_seconds is not None:
            kwargs["timeout"] = self._timeout_seconds
        return httpx.AsyncClient(**kwargs)
