from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who produced a turn in the conversation."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single turn in the conversation thread.

    Attributes:
        text: Displayed content.
        sender: Either the user or the bot.
        timestamp: When the turn was appended to the thread.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


class ChatRequest(BaseModel):
    """Request payload for the assistant's chat endpoint.

    Attributes:
        message: The user's question, sent as typed.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message")
    @classmethod
    def reject_blank_message(cls, v: str) -> str:
        """Refuse whitespace-only messages without altering the text sent."""
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


class ChatResponse(BaseModel):
    """Reply from the assistant backend.

    Attributes:
        response: The assistant's final answer.
        steps: Intermediate reasoning steps; passed through untouched.
    """

    response: str
    steps: list[Any] = Field(default_factory=list)

    @field_validator("steps", mode="before")
    @classmethod
    def default_null_steps(cls, v: Any) -> Any:
        # Backends serialize a missing step list as null
        return [] if v is None else v
