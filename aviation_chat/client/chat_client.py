"""HTTP client for the aviation assistant backend.

One POST per user message to the configured chat endpoint. Every way a
request can go wrong (connection errors, timeouts, non-2xx status, a body
that is not JSON or lacks a `response` field) is reported to the caller as
a single TransportFailure. There is no retry and no caching; the user
resends manually.
"""

import logging

import httpx
from pydantic import ValidationError

from aviation_chat.client.config import ClientConfig, get_client_config
from aviation_chat.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class TransportFailure(Exception):
    """Raised when a chat request does not produce a usable reply."""

    pass


class ChatClient:
    """Client for the assistant's chat endpoint.

    Wraps an httpx.AsyncClient with:
    - A fixed endpoint URL and timeout from ClientConfig
    - Response validation against ChatResponse
    - Collapsing of all failure modes into TransportFailure
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            http_client: Optional pre-built httpx client. When given, the
                         caller owns its lifecycle.
        """
        self._config = config or get_client_config()
        self._http = http_client
        self._owns_http = http_client is None

    @property
    def api_url(self) -> str:
        return self._config.api_url

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._config.request_timeout)
        return self._http

    async def exchange(self, message: str) -> ChatResponse:
        """Send one message and return the parsed reply.

        Args:
            message: The user's text, sent unmodified.

        Returns:
            ChatResponse with the answer and any opaque steps.

        Raises:
            TransportFailure: On any network, status or payload error.
        """
        try:
            payload = ChatRequest(message=message).model_dump()
        except ValidationError as e:
            raise TransportFailure("Refusing to send an empty message") from e

        logger.debug(f"POST {self.api_url} ({len(message)} chars)")

        try:
            response = await self._get_http().post(self.api_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Chat endpoint returned HTTP {e.response.status_code}")
            raise TransportFailure(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning(f"Chat request failed: {e!r}")
            raise TransportFailure(f"Connection failed: {e}") from e
        except httpx.InvalidURL as e:
            logger.warning(f"Chat endpoint URL rejected: {e}")
            raise TransportFailure(f"Invalid endpoint URL: {e}") from e

        try:
            reply = ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Malformed chat response: {e.error_count()} error(s)")
            raise TransportFailure("Malformed response body") from e

        logger.debug(f"Received reply ({len(reply.response)} chars, {len(reply.steps)} steps)")
        return reply

    async def send_message(self, message: str) -> str:
        """Send one message and return only the assistant's answer text."""
        reply = await self.exchange(message)
        return reply.response

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool if this client owns it."""
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None


# Module-level singleton instance
_chat_client: ChatClient | None = None


def get_chat_client() -> ChatClient:
    """Get or create the global chat client.

    Shares one connection pool across all page sessions.

    Returns:
        The ChatClient instance.
    """
    global _chat_client
    if _chat_client is None:
        _chat_client = ChatClient()
    return _chat_client
