"""Aviation Chat UI - browser chat front end for the aviation assistant.

Combines NiceGUI for the chat page, httpx for talking to the assistant
backend, FastAPI for serving, and Pydantic for data validation.

Components:
    - client: HTTP transport to the assistant's /api/chat endpoint
    - conversation: message thread and single-flight reply guard
    - models: message and wire schemas
    - api: FastAPI application the UI is mounted on
    - ui: Web interface for chat interactions
"""

__version__ = "0.1.0"
