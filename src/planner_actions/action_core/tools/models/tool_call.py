"""Data models for a batch of tool calls and their results."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, Sequence, Tuple

from .models import ToolStatus


@dataclass(frozen=True)
class ToolCall:
    """Represents a normalized tool call request issued by the planner."""

    name: str
    args: Any = None
    call_id: Optional[str] = None


@dataclass(frozen=True)
class ToolInvocationResult:
    """Represents the outcome of executing a single tool call."""

    correlation_id: str
    name: str
    status: ToolStatus
    content: str

    def with_content(self, content: str) -> "ToolInvocationResult":
        """Return a copy with replaced content. The status is kept as is."""
        return replace(self, content=content)


@dataclass(frozen=True)
class ActionBatch:
    """Tool calls paired positionally with their results: ``results[i]`` answers ``calls[i]``."""

    calls: Tuple[ToolCall, ...]
    results: Tuple[ToolInvocationResult, ...]

    def __post_init__(self) -> None:
        if len(self.calls) != len(self.results):
            raise ValueError(
                f"Batch has {len(self.calls)} call(s) but {len(self.results)} result(s)."
            )

    @classmethod
    def of(cls, calls: Sequence[ToolCall], results: Sequence[ToolInvocationResult]) -> "ActionBatch":
        return cls(calls=tuple(calls), results=tuple(results))

    def pairs(self) -> Iterator[Tuple[ToolCall, ToolInvocationResult]]:
        return zip(self.calls, self.results)
