"""Tools available to the planner during its read-only phase."""

from typing import Callable, List

from ..models import ToolDefinition
from .context import ActionContext, PlannerNotes
from .shell import create_shell_tool, SHELL_TOOL_NAME
from .search import create_search_tool, build_rg_command, SEARCH_TOOL_NAME
from .notes import create_notes_tool

ToolFactory = Callable[[ActionContext], ToolDefinition]

PLANNER_TOOL_FACTORIES: List[ToolFactory] = [create_shell_tool, create_search_tool, create_notes_tool]

__all__ = [
    "ActionContext",
    "PlannerNotes",
    "ToolFactory",
    "PLANNER_TOOL_FACTORIES",
    "create_shell_tool",
    "create_search_tool",
    "create_notes_tool",
    "build_rg_command",
    "SHELL_TOOL_NAME",
    "SEARCH_TOOL_NAME",
]
