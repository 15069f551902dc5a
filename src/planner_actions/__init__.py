"""Planner Actions - executes a planner's tool calls and enforces its read-only phase."""

from .action_core import (
    ActionRunner,
    ActionConfig,
    AssistantMessage,
    UserMessage,
    ToolMessage,
    ToolCall,
    ToolDefinition,
    ToolOutput,
    ToolRegistry,
    PlannerNotes,
    LocalGitEnvironment,
    LocalSessionResolver,
)
from .action_impl.openai_api import OpenAIActionAdapter, OpenAIToolRegistry

__all__ = [
    "ActionRunner",
    "ActionConfig",
    "AssistantMessage",
    "UserMessage",
    "ToolMessage",
    "ToolCall",
    "ToolDefinition",
    "ToolOutput",
    "ToolRegistry",
    "PlannerNotes",
    "LocalGitEnvironment",
    "LocalSessionResolver",
    "OpenAIActionAdapter",
    "OpenAIToolRegistry",
]
