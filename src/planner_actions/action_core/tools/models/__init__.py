"""Tool-related data models."""

from .models import ToolDefinition, ToolOutput, ToolStatus
from .tool_call import ToolCall, ToolInvocationResult, ActionBatch

__all__ = ["ToolDefinition", "ToolOutput", "ToolStatus", "ToolCall", "ToolInvocationResult", "ActionBatch"]
