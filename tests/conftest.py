"""Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from edgeworkers import EdgeGridConfig, EdgeWorkersClient, Settings


class MockAPI:
    """Serves one canned response and records every request it receives"""

    def __init__(self, status: int = 200, body: str | bytes = "", headers: dict[str, str] | None = None):
        self.status = status
        self.body = body.encode() if isinstance(body, str) else body
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, content=self.body, headers=self.headers)

    @property
    def request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def path(self) -> str:
        """Path and query of the last request"""
        return self.request.url.raw_path.decode()

    def json(self) -> Any:
        return json.loads(self.request.content)


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport that never gets a response"""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


# =============================================================================
# Credentials and Settings
# =============================================================================


@pytest.fixture
def credentials() -> EdgeGridConfig:
    """EdgeGrid credentials for a fake host"""
    return EdgeGridConfig(
        host="akab-test.luna.akamaiapis.net",
        client_token="akab-client-token",
        client_secret="client-secret",
        access_token="akab-access-token",
    )


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any local .env file"""
    return Settings(_env_file=None)  # type: ignore[call-arg]


# =============================================================================
# Client
# =============================================================================


@pytest_asyncio.fixture
async def make_client(
    credentials, settings
) -> AsyncGenerator[Callable[..., EdgeWorkersClient], None]:
    """Build clients served by a MockAPI, closed after the test"""
    clients: list[EdgeWorkersClient] = []

    def factory(api: httpx.AsyncBaseTransport | MockAPI, config: EdgeGridConfig | None = None) -> EdgeWorkersClient:
        transport = api if isinstance(api, httpx.AsyncBaseTransport) else httpx.MockTransport(api)
        client = EdgeWorkersClient(config or credentials, settings=settings, transport=transport)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.close()


@pytest.fixture
def mock_api() -> type[MockAPI]:
    """MockAPI factory: mock_api(status, body, headers)"""
    return MockAPI


@pytest.fixture
def failing_transport() -> FailingTransport:
    return FailingTransport()
