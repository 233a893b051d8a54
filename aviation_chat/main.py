"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from aviation_chat.api.app import create_app
    from aviation_chat.client.config import get_client_config
    from aviation_chat.ui.chat_page import APP_TITLE, chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title=APP_TITLE,
        favicon="✈️",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "aviation-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Assistant backend: {get_client_config().api_url}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the NiceGUI page as a standalone server without the FastAPI shell.

    Useful when the UI is deployed next to an existing reverse proxy.
    """
    from aviation_chat.ui.chat_page import main as run_ui

    logger.info(f"Starting NiceGUI on http://localhost:{os.getenv('UI_PORT', '8081')}")
    run_ui()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run the UI without the FastAPI shell.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Aviation Chat UI in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
