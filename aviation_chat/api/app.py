"""FastAPI application factory and configuration.

Hosts the health endpoint and serves as the ASGI app the NiceGUI chat
page is mounted onto.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aviation_chat import __version__
from aviation_chat.client.chat_client import get_chat_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Releases the shared chat client's connection pool on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Aviation Chat UI...")
    yield
    logger.info("Shutting down Aviation Chat UI...")
    await get_chat_client().aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Aviation Chat UI",
        description=(
            "Browser chat interface for the aviation assistant. Forwards "
            "questions about flight statuses, airlines and airports to the "
            "assistant backend and renders its replies."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "aviation-chat-ui"}

    return application


app = create_app()
