"""Pytest fixtures for the Airtel token and payment clients."""

import asyncio

import httpx
import pytest

from src.utils.config_loader import AirtelConfig

BASE_URL = "https://openapi.airtel.test"


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeAirtel:
    """
    Stand-in for the Airtel Open API behind an httpx.MockTransport.

    Each endpoint answers with the next queued (status, body) pair; a queued
    exception is raised instead, to simulate transport failures.
    """

    def __init__(self):
        self.token_responses = []
        self.payment_responses = []
        self.requests = []

    @property
    def token_requests(self):
        return [r for r in self.requests if r.url.path == "/auth/oauth2/token"]

    @property
    def payment_requests(self):
        return [r for r in self.requests if r.url.path == "/merchant/v1/payments/"]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # Yield like a real network call so concurrent callers interleave.
        await asyncio.sleep(0)
        if request.url.path == "/auth/oauth2/token":
            queue = self.token_responses
        elif request.url.path == "/merchant/v1/payments/":
            queue = self.payment_responses
        else:
            return httpx.Response(404, json={"error": "not found"})

        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        status, body = item
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def airtel_config():
    return AirtelConfig(
        base_url=BASE_URL,
        country="UG",
        currency="UGX",
        client_id="client-123",
        client_secret="secret-456",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_airtel():
    return FakeAirtel()
