"""Transport to the aviation assistant backend.

Turns one user message into one POST /api/chat request and one reply
string. All failures surface as TransportFailure.
"""

from aviation_chat.client.chat_client import ChatClient, TransportFailure, get_chat_client
from aviation_chat.client.config import ClientConfig, get_client_config

__all__ = [
    "ChatClient",
    "ClientConfig",
    "TransportFailure",
    "get_chat_client",
    "get_client_config",
]
