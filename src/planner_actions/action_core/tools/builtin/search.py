"""Recursive text search tool (ripgrep) for the planner."""

from typing import Annotated, List, Optional

from pydantic import Field

from ..models import ToolDefinition, ToolOutput
from ..registry import build_tool_definition
from .context import ActionContext

SEARCH_TOOL_NAME = "search"

# ripgrep exit codes: 0 matches, 1 no matches, 2 error
RG_NO_MATCHES = 1


def build_rg_command(
    query: str,
    *,
    fixed_string: bool = False,
    case_sensitive: bool = True,
    context_lines: int = 0,
    include_files: Optional[List[str]] = None,
    exclude_files: Optional[List[str]] = None,
    max_columns: int = 300,
) -> List[str]:
    """Translate search arguments into an ``rg`` argument list."""
    cmd = ["rg", "--color=never", "--line-number", "--no-heading", "--max-columns", str(max_columns)]
    if fixed_string:
        cmd.append("--fixed-strings")
    if not case_sensitive:
        cmd.append("--ignore-case")
    if context_lines:
        cmd.extend(["--context", str(context_lines)])
    for pattern in include_files or []:
        cmd.extend(["--glob", pattern])
    for pattern in exclude_files or []:
        cmd.extend(["--glob", f"!{pattern}"])
    # An explicit path stops rg from searching stdin
    cmd.extend(["--", query, "."])
    return cmd


def create_search_tool(context: ActionContext) -> ToolDefinition:
    """Build the ``search`` tool bound to the batch's environment."""

    async def search(
        query: Annotated[str, Field(description="The regular expression (or literal string) to search for.")],
        fixed_string: Annotated[
            bool, Field(description="Treat the query as a literal string instead of a regular expression.")
        ] = False,
        case_sensitive: Annotated[bool, Field(description="Whether the search is case sensitive.")] = True,
        context_lines: Annotated[
            int, Field(description="Number of lines to show before and after each match.", ge=0)
        ] = 0,
        include_files: Annotated[
            Optional[List[str]], Field(description="Glob patterns of files to search, e.g. ['*.py'].")
        ] = None,
        exclude_files: Annotated[
            Optional[List[str]], Field(description="Glob patterns of files to skip, e.g. ['*.lock'].")
        ] = None,
    ) -> ToolOutput:
        """Searches the repository recursively for text and returns the matching lines with file names and line numbers."""
        cmd = build_rg_command(
            query,
            fixed_string=fixed_string,
            case_sensitive=case_sensitive,
            context_lines=context_lines,
            include_files=include_files,
            exclude_files=exclude_files,
            max_columns=context.config.search_max_columns,
        )
        result = await context.environment.run_command(cmd, cwd=context.working_directory)
        if result.ok:
            return ToolOutput(result=result.output, status="success")
        if result.exit_code == RG_NO_MATCHES:
            return ToolOutput(result="No results found.", status="success")
        return ToolOutput(result=f"Search failed. Exit code: {result.exit_code}\nResult: {result.output}", status="error")

    return build_tool_definition(search, name=SEARCH_TOOL_NAME)
