"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: Config pointing at a fake assistant endpoint
    - async_client: HTTPX client for the FastAPI app
    - make_chat_client: Builds a ChatClient over an httpx.MockTransport handler
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from aviation_chat.api import app
from aviation_chat.client.chat_client import ChatClient
from aviation_chat.client.config import ClientConfig

TEST_API_URL = "http://assistant.test/api/chat"


@pytest.fixture
def client_config() -> ClientConfig:
    """Return config aimed at a fake assistant backend."""
    return ClientConfig(api_url=TEST_API_URL, request_timeout=5.0)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def make_chat_client(
    client_config: ClientConfig,
) -> AsyncGenerator[Callable[[Callable[[httpx.Request], httpx.Response]], ChatClient]]:
    """Yield a factory that wires a ChatClient to a mock request handler."""
    http_clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ChatClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http)
        return ChatClient(config=client_config, http_client=http)

    yield factory

    for http in http_clients:
        await http.aclose()
