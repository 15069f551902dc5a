"""Detection and reversal of file changes made during the read-only planning phase."""

from __future__ import annotations

from typing import List, Sequence

from ...logger import get_logger
from ...sandbox import ExecutionEnvironment, SideEffectReport
from ..models import ToolInvocationResult

logger = get_logger(__name__)

NOTES_TOOL_NAME = "take_notes"

READ_ONLY_WARNING_TEMPLATE = (
    "**WARNING**: THIS TOOL, OR A PREVIOUS TOOL HAS CHANGED FILES IN THE REPO.\n"
    "Remember that you are only permitted to take **READ** actions during the planning step. "
    "The changes have been reverted.\n\n"
    "Please ensure you only take read actions during the planning step to gather context. "
    f"You may also call the `{NOTES_TOOL_NAME}` tool at any time to record important information "
    "for the programmer step.\n\n"
    "Command Output:\n\n"
    "{content}"
)


class SideEffectGuard:
    """Compensating control for the planner's read-only policy.

    Runs once per batch after every invocation has settled. Tools run in an
    external environment, so mutations can only be found after the fact. No
    per-call attribution is possible: when anything changed, all changes are
    reverted and every result of the batch carries the warning.
    """

    async def inspect(self, environment: ExecutionEnvironment, working_directory: str) -> SideEffectReport:
        """Query the environment once for uncommitted changes."""
        return SideEffectReport.from_paths(await environment.changed_paths(working_directory))

    async def guard(
        self,
        results: Sequence[ToolInvocationResult],
        environment: ExecutionEnvironment,
        working_directory: str,
    ) -> List[ToolInvocationResult]:
        """Revert side effects of a batch and flag its results.

        Args:
            results: The ordered results of the batch.
            environment: The environment the batch ran against.
            working_directory: Repository path inside the environment.

        Returns:
            ``results`` unchanged when the tree is clean. Otherwise every result with its
            content wrapped in the read-only warning; statuses are untouched.
        """
        report = await self.inspect(environment, working_directory)
        if not report.non_empty:
            return list(results)

        logger.warning(
            "Changes found in the codebase after taking action. Reverting. Changed files: %s",
            sorted(report.changed_paths),
        )
        await environment.revert_all(working_directory)

        return [result.with_content(self.wrap(result.content)) for result in results]

    @staticmethod
    def wrap(content: str) -> str:
        return READ_ONLY_WARNING_TEMPLATE.format(content=content)
