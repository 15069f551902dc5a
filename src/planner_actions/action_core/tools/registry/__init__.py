"""Tool registry."""

from .base import ToolRegistry, build_tool_definition

__all__ = ["ToolRegistry", "build_tool_definition"]
