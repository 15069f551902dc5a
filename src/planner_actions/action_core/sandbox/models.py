"""Data models returned by the execution environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command run inside the execution environment."""

    exit_code: int
    output: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class SideEffectReport:
    """Uncommitted paths found in the working tree after a batch."""

    changed_paths: FrozenSet[str] = frozenset()

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "SideEffectReport":
        return cls(changed_paths=frozenset(paths))

    @property
    def non_empty(self) -> bool:
        return bool(self.changed_paths)
