"""Integration tests for the FastAPI shell the chat UI is mounted on.

Uses the real app through ASGITransport; no assistant backend is needed.
"""

from unittest.mock import AsyncMock, MagicMock, patch

from httpx import ASGITransport, AsyncClient

from aviation_chat.api.app import create_app, lifespan


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health_returns_healthy(self, async_client: AsyncClient) -> None:
        """Health check reports the service as healthy."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "aviation-chat-ui"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        """POST to the GET-only health endpoint returns 405."""
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        """Response includes CORS headers for cross-origin requests."""
        response = await async_client.get(
            "/health", headers={"Origin": "http://localhost:4200"}
        )

        assert "access-control-allow-origin" in response.headers


class TestAppFactory:
    """Tests for create_app and lifespan."""

    async def test_factory_builds_independent_apps(self) -> None:
        """Each call produces a fresh, working application."""
        first, second = create_app(), create_app()
        assert first is not second

        transport = ASGITransport(app=second)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/health")

        assert response.status_code == 200

    async def test_lifespan_closes_chat_client(self) -> None:
        """Shutdown releases the shared chat client's connections."""
        chat_client = MagicMock()
        chat_client.aclose = AsyncMock()

        with patch("aviation_chat.api.app.get_chat_client", return_value=chat_client):
            async with lifespan(create_app()):
                chat_client.aclose.assert_not_awaited()

        chat_client.aclose.assert_awaited_once()
