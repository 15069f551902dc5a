"""Per-batch context that the planner tools close over."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import ActionConfig
from ...sandbox import ExecutionEnvironment


class PlannerNotes:
    """Notes recorded by the planner. Owned by the caller and kept across batches."""

    def __init__(self, notes: Optional[List[str]] = None) -> None:
        self._notes: List[str] = list(notes or [])

    def extend(self, notes: List[str]) -> None:
        self._notes.extend(notes)

    @property
    def items(self) -> List[str]:
        return list(self._notes)

    def __len__(self) -> int:
        return len(self._notes)


@dataclass
class ActionContext:
    """What a tool factory needs to build the tools of one batch."""

    environment: ExecutionEnvironment
    working_directory: str
    notes: PlannerNotes = field(default_factory=PlannerNotes)
    config: ActionConfig = field(default_factory=ActionConfig)

    def resolve_path(self, path: Optional[str]) -> str:
        """Resolve ``path`` against the working directory.

        Raises:
            ValueError: If ``path`` is absolute or points outside the working directory.
        """
        if not path:
            return self.working_directory
        relative = os.path.normpath(path)
        if os.path.isabs(relative) or relative == os.pardir or relative.startswith(os.pardir + os.sep):
            raise ValueError(f"Path '{path}' must be relative to the repository root and stay inside it.")
        if relative == os.curdir:
            return self.working_directory
        return os.path.join(self.working_directory, relative)
