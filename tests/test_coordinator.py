import asyncio
from typing import List

import pytest

from planner_actions.action_core import (
    BatchCoordinator,
    BatchPreconditionError,
    ToolCall,
    ToolDefinition,
    ToolRegistry,
)


def _sleeper(name: str, delay: float, finished: List[str]) -> ToolDefinition:
    async def func() -> str:
        await asyncio.sleep(delay)
        finished.append(name)
        return f"{name} done"

    return ToolDefinition(name=name, description=name, func=func)


@pytest.mark.asyncio
async def test_results_follow_request_order_not_completion_order() -> None:
    finished: List[str] = []
    registry = ToolRegistry.from_definitions(
        [_sleeper("slow", 0.05, finished), _sleeper("medium", 0.02, finished), _sleeper("fast", 0.0, finished)]
    )
    calls = [ToolCall(name="slow", call_id="1"), ToolCall(name="medium", call_id="2"), ToolCall(name="fast", call_id="3")]

    results = await BatchCoordinator().run(calls, registry)

    assert finished == ["fast", "medium", "slow"]
    assert [r.correlation_id for r in results] == ["1", "2", "3"]
    assert [r.content for r in results] == ["slow done", "medium done", "fast done"]


@pytest.mark.asyncio
async def test_order_does_not_depend_on_call_ids() -> None:
    finished: List[str] = []
    registry = ToolRegistry.from_definitions([_sleeper("slow", 0.03, finished), _sleeper("fast", 0.0, finished)])
    calls = [ToolCall(name="slow"), ToolCall(name="fast"), ToolCall(name="slow")]

    results = await BatchCoordinator().run(calls, registry)

    assert len(results) == len(calls)
    assert [r.name for r in results] == ["slow", "fast", "slow"]
    assert all(r.correlation_id == "" for r in results)


@pytest.mark.asyncio
async def test_calls_run_concurrently() -> None:
    started = asyncio.Event()

    async def waiter() -> str:
        await asyncio.wait_for(started.wait(), timeout=1)
        return "released"

    async def releaser() -> str:
        started.set()
        return "set"

    registry = ToolRegistry.from_definitions(
        [
            ToolDefinition(name="waiter", description="waits", func=waiter),
            ToolDefinition(name="releaser", description="releases", func=releaser),
        ]
    )

    results = await BatchCoordinator().run([ToolCall(name="waiter"), ToolCall(name="releaser")], registry)

    assert [r.content for r in results] == ["released", "set"]
    assert all(r.status == "success" for r in results)


@pytest.mark.asyncio
async def test_one_failure_does_not_affect_siblings() -> None:
    finished: List[str] = []

    async def broken() -> str:
        raise RuntimeError("boom")

    registry = ToolRegistry.from_definitions(
        [ToolDefinition(name="broken", description="broken", func=broken), _sleeper("ok", 0.01, finished)]
    )
    calls = [ToolCall(name="broken"), ToolCall(name="missing"), ToolCall(name="ok")]

    results = await BatchCoordinator().run(calls, registry)

    assert [r.status for r in results] == ["error", "error", "success"]
    assert results[1].content == "Unknown tool: missing"
    assert finished == ["ok"]


@pytest.mark.asyncio
async def test_empty_batch_is_a_precondition_error() -> None:
    with pytest.raises(BatchPreconditionError, match="No tool calls"):
        await BatchCoordinator().run([], ToolRegistry())
