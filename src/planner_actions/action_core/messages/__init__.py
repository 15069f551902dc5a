"""Expose provider-agnostic message model types."""

from .models import BaseMessage, UserMessage, AssistantMessage, ToolMessage

__all__ = [
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
]
