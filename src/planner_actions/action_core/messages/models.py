"""Provider-agnostic message models for the planner's conversation history."""

from pydantic import BaseModel
from abc import ABC
from typing import Optional, List

from ..tools.models.models import ToolStatus
from ..tools.models.tool_call import ToolCall


class BaseMessage(ABC, BaseModel):
    """Base model for messages exchanged with the planner.

    Attributes:
        author: Role associated with the message.
        content: Text payload of the message.
    """

    author: str
    content: str


class UserMessage(BaseMessage):
    """Message authored by an end user."""

    author: str = "user"


class AssistantMessage(BaseMessage):
    """Message authored by the agent, optionally containing tool calls."""

    author: str = "assistant"
    content: str = ""
    tool_calls: Optional[List[ToolCall]] = None


class ToolMessage(BaseMessage):
    """Message emitted for a tool invocation."""

    author: str = "tool"
    tool_call_id: str
    name: str
    status: ToolStatus = "success"
