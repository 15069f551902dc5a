"""Note-taking tool: the planner's sanctioned way to keep information across steps."""

from typing import Annotated, List

from pydantic import Field

from ..execution.guard import NOTES_TOOL_NAME
from ..models import ToolDefinition, ToolOutput
from ..registry import build_tool_definition
from .context import ActionContext


def create_notes_tool(context: ActionContext) -> ToolDefinition:
    """Build the ``take_notes`` tool writing into the caller-owned notes."""

    def take_notes(
        notes: Annotated[
            List[str], Field(description="Notes to record for the programmer step. One fact per entry.", min_length=1)
        ],
    ) -> ToolOutput:
        """Records notes about the codebase that the programmer step will need. Use it to keep information instead of writing files."""
        context.notes.extend(notes)
        return ToolOutput(result=f"Successfully saved {len(notes)} note(s).")

    return build_tool_definition(take_notes, name=NOTES_TOOL_NAME)
