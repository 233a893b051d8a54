"""Conversation store: the message thread and its single-flight guard.

Responsibilities:
    - Seeding each session with the bot welcome message
    - Appending user turns and exactly one bot turn per user turn
    - Rejecting submissions while a reply is pending
    - Converting transport failures into a fixed fallback reply
"""

from aviation_chat.conversation.store import (
    FALLBACK_MESSAGE,
    WELCOME_MESSAGE,
    ConversationStore,
    ReplySource,
    log_transport_failure,
)

__all__ = [
    "FALLBACK_MESSAGE",
    "WELCOME_MESSAGE",
    "ConversationStore",
    "ReplySource",
    "log_transport_failure",
]
