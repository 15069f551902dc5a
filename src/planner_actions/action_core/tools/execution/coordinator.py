"""Concurrent fan-out of a batch of tool calls."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

from ...exceptions import BatchPreconditionError
from ...logger import get_logger
from ..models import ToolCall, ToolInvocationResult
from ..registry import ToolRegistry
from .executor import InvocationExecutor

logger = get_logger(__name__)


class BatchCoordinator:
    """Runs every call of a batch concurrently and joins the results in request order.

    ``results[i]`` always answers ``calls[i]``, independent of completion order
    and of whether call ids are present or unique. One failing call never
    cancels or affects its siblings.
    """

    def __init__(self, executor: Optional[InvocationExecutor] = None) -> None:
        self.executor = executor or InvocationExecutor()

    async def run(self, calls: Sequence[ToolCall], registry: ToolRegistry) -> List[ToolInvocationResult]:
        """Execute a batch of tool calls.

        Args:
            calls: The calls issued by the planner in one turn.
            registry: The registry of the current batch.

        Returns:
            One result per call, in the same order as ``calls``.

        Raises:
            BatchPreconditionError: If ``calls`` is empty.
        """
        if not calls:
            raise BatchPreconditionError("No tool calls found.")

        logger.info("Processing %d planner tool call(s).", len(calls))
        tasks = [self.executor.execute(call, registry) for call in calls]
        results = await asyncio.gather(*tasks)
        return list(results)
