"""Transport configuration with environment variable loading.

Pydantic-based configuration for the assistant backend client.
"""

import os

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "http://localhost:8080/api/chat"


class ClientConfig(BaseModel):
    """Configuration for the assistant chat client.

    Attributes:
        api_url: Full URL of the assistant's chat endpoint.
        request_timeout: Seconds before an outstanding request is abandoned.
    """

    api_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_URL", DEFAULT_API_URL),
        description="Assistant chat endpoint URL",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_REQUEST_TIMEOUT", "120")),
        gt=0.0,
        description="HTTP timeout in seconds for a single chat request",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that the endpoint is an absolute http(s) URL with a host."""
        v = v.strip()
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"CHAT_API_URL is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(
                "CHAT_API_URL must be an http:// or https:// URL with a host"
            )
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If CHAT_API_URL is not an http(s) URL.
    """
    return ClientConfig()
