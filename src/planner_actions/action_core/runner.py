"""Entry point of the planner's action step."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .config import ActionConfig
from .exceptions import BatchPreconditionError
from .logger import get_logger
from .messages import AssistantMessage, BaseMessage, ToolMessage
from .sandbox import SessionResolver
from .tools.builtin import PLANNER_TOOL_FACTORIES, ActionContext, PlannerNotes, ToolFactory
from .tools.execution import BatchCoordinator, InvocationExecutor, ResultFormatter, SideEffectGuard
from .tools.models import ActionBatch, ToolCall, ToolInvocationResult
from .tools.registry import ToolRegistry

logger = get_logger(__name__)


class ActionRunner:
    """
    Executes the tool calls of the planner's last message.

    For each batch it resolves the session's environment once, builds a fresh
    registry from the tool factories, runs the calls concurrently, reverts any
    file changes the calls made, and returns one ``ToolMessage`` per call in
    request order.
    """

    def __init__(
        self,
        session_resolver: SessionResolver,
        tool_factories: Optional[Sequence[ToolFactory]] = None,
        config: Optional[ActionConfig] = None,
        guard: Optional[SideEffectGuard] = None,
    ) -> None:
        """
        Args:
            session_resolver: Looks up the execution environment of a session.
            tool_factories: Builders for the tools of the phase. Defaults to shell, search and take_notes.
            config: Runtime configuration. Defaults to ``ActionConfig()``.
            guard: Side-effect guard. Defaults to ``SideEffectGuard()``.
        """
        self.session_resolver = session_resolver
        self.tool_factories = list(tool_factories if tool_factories is not None else PLANNER_TOOL_FACTORIES)
        self.config = config or ActionConfig()
        self.formatter = ResultFormatter(self.config.max_output_chars)
        self.coordinator = BatchCoordinator(
            InvocationExecutor(formatter=self.formatter, tool_timeout=self.config.tool_timeout)
        )
        self.guard = guard or SideEffectGuard()

    async def take_actions(
        self,
        message: BaseMessage,
        *,
        session_id: str,
        working_directory: str,
        notes: Optional[PlannerNotes] = None,
    ) -> List[ToolMessage]:
        """Run the tool calls of ``message``.

        Args:
            message: The planner's last message. Must be an assistant message with tool calls.
            session_id: Identifier of the session whose environment the tools run in.
            working_directory: Repository path inside the environment.
            notes: Caller-owned notes the ``take_notes`` tool writes into.

        Returns:
            One tool message per tool call, in the order of ``message.tool_calls``.

        Raises:
            BatchPreconditionError: If the message is not an assistant message with tool calls.
        """
        calls = self._extract_tool_calls(message)

        environment = await self.session_resolver.get(session_id)
        context = ActionContext(
            environment=environment,
            working_directory=working_directory,
            notes=notes if notes is not None else PlannerNotes(),
            config=self.config,
        )
        registry = ToolRegistry.from_definitions(factory(context) for factory in self.tool_factories)

        results = await self.coordinator.run(calls, registry)
        results = await self.guard.guard(results, environment, working_directory)

        batch = ActionBatch.of(calls, results)
        logger.info("Completed planner tool action: %s", self.formatter.summarize(batch))
        return [self.to_message(result) for result in batch.results]

    @staticmethod
    def _extract_tool_calls(message: BaseMessage) -> List[ToolCall]:
        if not isinstance(message, AssistantMessage):
            raise BatchPreconditionError("Last message is not an AI message with tool calls.")
        if not message.tool_calls:
            raise BatchPreconditionError("No tool calls found.")
        return list(message.tool_calls)

    @staticmethod
    def to_message(result: ToolInvocationResult) -> ToolMessage:
        return ToolMessage(
            tool_call_id=result.correlation_id,
            name=result.name,
            status=result.status,
            content=result.content,
        )
