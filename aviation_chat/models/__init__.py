"""Pydantic models for chat messages and the assistant wire format."""

from aviation_chat.models.schemas import ChatRequest, ChatResponse, Message, Sender

__all__ = ["ChatRequest", "ChatResponse", "Message", "Sender"]
