"""Conversation state for one chat page session.

Holds the append-only message thread and the awaiting-reply flag that
keeps at most one request to the assistant in flight. The rendering
layer reads from the store and calls submit_user_text; it never mutates
the thread directly.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from aviation_chat.client.chat_client import TransportFailure
from aviation_chat.models.schemas import Message, Sender

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Hello! I am your Aviation Assistant. "
    "Ask me about flight statuses, airlines, or airports."
)
FALLBACK_MESSAGE = "Sorry, I encountered an error while processing your request."


class ReplySource(Protocol):
    """Anything that turns a user message into the assistant's answer."""

    async def send_message(self, message: str) -> str: ...


def log_transport_failure(error: Exception) -> None:
    """Default diagnostics sink: record the raw error for operators."""
    logger.error(f"Error sending message: {error}", exc_info=error)


class ConversationStore:
    """Manages the message thread for a user session.

    State machine per submitted message: idle -> awaiting reply -> idle.
    A submission while a reply is pending is dropped, not queued.
    """

    def __init__(
        self,
        client: ReplySource,
        diagnostics: Callable[[Exception], None] | None = None,
    ) -> None:
        self._client = client
        self._diagnostics = diagnostics or log_transport_failure
        self._messages: list[Message] = []
        self._listeners: list[Callable[[], None]] = []
        self.awaiting_reply: bool = False
        self.session_id: str = str(uuid.uuid4())

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every change to the thread or flag."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            try:
                listener()
            except Exception:
                # Listener errors never block the exchange
                logger.exception(f"Conversation listener {listener!r} failed")

    def _append(self, text: str, sender: Sender) -> Message:
        now = datetime.now()
        # Wall clock may step backwards; thread order must stay timestamp order
        if self._messages and now < self._messages[-1].timestamp:
            now = self._messages[-1].timestamp
        message = Message(text=text, sender=sender, timestamp=now)
        self._messages.append(message)
        return message

    def initialize(self) -> None:
        """Reset the thread to the single bot welcome message.

        Raises:
            RuntimeError: If a reply is still pending.
        """
        if self.awaiting_reply:
            raise RuntimeError("Cannot reset the conversation while a reply is pending")
        self._messages.clear()
        self._append(WELCOME_MESSAGE, Sender.BOT)
        self._notify()

    async def submit_user_text(self, text: str) -> bool:
        """Append the user's text and fetch exactly one bot reply for it.

        Blank text, or any call made while a reply is pending, is ignored.

        Args:
            text: What the user typed.

        Returns:
            True if the text was accepted and a reply was appended,
            False if the call was a no-op.
        """
        if not text.strip() or self.awaiting_reply:
            return False

        # No await between the guard check and setting the flag
        self._append(text, Sender.USER)
        self.awaiting_reply = True

        try:
            self._notify()
            reply = await self._client.send_message(text)
        except TransportFailure as e:
            self.on_reply_failure(e)
        except Exception as e:
            # Still owe the user a reply; the error itself is a bug
            self.on_reply_failure(e)
            raise
        else:
            self.on_reply_success(reply)
        return True

    def on_reply_success(self, reply_text: str) -> None:
        """Append the assistant's answer and clear the pending flag."""
        self._append(reply_text, Sender.BOT)
        self.awaiting_reply = False
        self._notify()

    def on_reply_failure(self, error: Exception) -> None:
        """Show the fallback text to the user and report the raw error."""
        self._append(FALLBACK_MESSAGE, Sender.BOT)
        self.awaiting_reply = False
        self._diagnostics(error)
        self._notify()
