"""Shell command tool for the planner."""

from typing import Annotated, List, Optional

from pydantic import Field

from ..models import ToolDefinition, ToolOutput
from ..registry import build_tool_definition
from .context import ActionContext

SHELL_TOOL_NAME = "shell"


def create_shell_tool(context: ActionContext) -> ToolDefinition:
    """Build the ``shell`` tool bound to the batch's environment."""

    async def shell(
        command: Annotated[
            List[str], Field(description='The command to run, as a list of arguments, e.g. ["ls", "-la"].')
        ],
        workdir: Annotated[
            Optional[str],
            Field(
                description="Directory to run the command in, relative to the repository root and inside it. "
                "Defaults to the root."
            ),
        ] = None,
        timeout: Annotated[
            Optional[int], Field(description="Maximum runtime of the command in seconds.")
        ] = None,
    ) -> ToolOutput:
        """Runs a shell command in the repository and returns its output.
        Only use it to read and inspect the codebase; the planning step must not change any files."""
        result = await context.environment.run_command(
            " ".join(command),
            cwd=context.resolve_path(workdir),
            timeout=timeout or context.config.shell_timeout,
        )
        if result.ok:
            return ToolOutput(result=result.output, status="success")
        return ToolOutput(result=f"Command failed. Exit code: {result.exit_code}\nResult: {result.output}", status="error")

    return build_tool_definition(shell, name=SHELL_TOOL_NAME)
