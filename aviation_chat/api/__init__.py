"""ASGI application serving the chat UI.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted by aviation_chat.main)
"""

from aviation_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
