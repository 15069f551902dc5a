"""Protocols for the environment tools run in and the service that looks it up."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Union

from .models import CommandResult


class ExecutionEnvironment(Protocol):
    """
    The stateful host (sandbox, remote workspace, local checkout) where tools run.

    Every invocation in a batch shares one environment; implementations must
    tolerate concurrent ``run_command`` calls.
    """

    async def changed_paths(self, path: str) -> List[str]:
        """Return the uncommitted paths of the repository at ``path``."""
        ...

    async def revert_all(self, path: str) -> None:
        """Discard every uncommitted change of the repository at ``path`` (stash and clear)."""
        ...

    async def run_command(
        self,
        command: Union[str, Sequence[str]],
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """Run a command and return its exit code and combined output."""
        ...


class SessionResolver(Protocol):
    """Resolves a session identifier to its execution environment."""

    async def get(self, session_id: str) -> ExecutionEnvironment:
        """Look up the environment for ``session_id``."""
        ...
