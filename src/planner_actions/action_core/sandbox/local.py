"""Execution environment backed by a local git checkout."""

from __future__ import annotations

import asyncio
import os
import shlex
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ..exceptions import EnvironmentCommandError, SessionNotFoundError
from ..logger import get_logger
from .models import CommandResult

logger = get_logger(__name__)

TIMEOUT_EXIT_CODE = 124


class LocalGitEnvironment:
    """
    Runs commands with asyncio subprocesses against a directory on this machine.

    Relative paths passed to any method are resolved against ``root``.
    """

    def __init__(self, root: Union[str, Path], env: Optional[Dict[str, str]] = None) -> None:
        """
        Args:
            root: Directory commands run in by default.
            env: Optional environment variables for spawned processes. Defaults to a copy of os.environ.
        """
        self.root = Path(root)
        self._env = env

    async def run_command(
        self,
        command: Union[str, Sequence[str]],
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """Run a command, capturing stdout and stderr together.

        A string command is run through the shell; a sequence is executed directly.

        Returns:
            The command's exit code and output. On timeout the process is killed
            and the exit code is 124.
        """
        workdir = self._resolve(cwd)
        env = self._env if self._env is not None else os.environ.copy()
        logger.debug("Running command %r in '%s'.", command, workdir)

        if isinstance(command, str):
            proc = await asyncio.create_subprocess_shell(
                command,
                cwd=workdir,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                env=env,
            )
        else:
            proc = await asyncio.create_subprocess_exec(
                *command,
                cwd=workdir,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                env=env,
            )

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            proc.kill()
            stdout, _ = await proc.communicate()
            partial = stdout.decode(errors="replace") if stdout else ""
            return CommandResult(
                exit_code=TIMEOUT_EXIT_CODE,
                output=f"{partial}\nCommand timed out after {timeout} seconds.".lstrip("\n"),
            )

        output = stdout.decode(errors="replace") if stdout else ""
        return CommandResult(exit_code=proc.returncode if proc.returncode is not None else -1, output=output)

    async def changed_paths(self, path: str) -> List[str]:
        """List uncommitted paths (modified, added, deleted, untracked) via ``git status --porcelain``."""
        result = await self._git(["status", "--porcelain", "--untracked-files=all"], path)
        return _parse_porcelain(result.output)

    async def revert_all(self, path: str) -> None:
        """Stash every uncommitted change, untracked files included, then drop that stash.

        ``git stash push`` exits 0 without creating an entry when it finds nothing it can save,
        so the stash is only dropped when the top of the stash moved. Older stashes are never touched.
        """
        await self._git(["add", "-A"], path)
        before = await self._stash_head(path)
        await self._git(["stash", "push", "--quiet"], path)
        if await self._stash_head(path) == before:
            logger.warning("Nothing was stashed in '%s'; leaving the stash untouched.", self._resolve(path))
            return
        await self._git(["stash", "drop", "--quiet"], path)
        logger.info("Reverted uncommitted changes in '%s'.", self._resolve(path))

    async def _stash_head(self, path: str) -> Optional[str]:
        # Exits 1 when there is no stash at all
        result = await self.run_command(["git", "rev-parse", "-q", "--verify", "refs/stash"], cwd=path)
        return result.output.strip() if result.ok else None

    async def _git(self, args: List[str], path: str) -> CommandResult:
        result = await self.run_command(["git", *args], cwd=path)
        if not result.ok:
            msg = f"git {shlex.join(args)} failed with exit code {result.exit_code}: {result.output.strip()}"
            logger.error(msg)
            raise EnvironmentCommandError(msg)
        return result

    def _resolve(self, path: Optional[str]) -> str:
        if not path:
            return str(self.root)
        candidate = Path(path)
        return str(candidate if candidate.is_absolute() else self.root / candidate)


def _parse_porcelain(output: str) -> List[str]:
    """Extract paths from ``git status --porcelain`` (v1) output."""
    paths = []
    for line in output.splitlines():
        if len(line) < 4:
            continue
        entry = line[3:]
        # Renames and copies are reported as "old -> new"
        if " -> " in entry:
            entry = entry.split(" -> ", 1)[1]
        paths.append(entry.strip('"'))
    return paths


class LocalSessionResolver:
    """In-memory session lookup for local environments."""

    def __init__(self, sessions: Optional[Dict[str, LocalGitEnvironment]] = None) -> None:
        self._sessions: Dict[str, LocalGitEnvironment] = dict(sessions or {})

    def add(self, session_id: str, environment: LocalGitEnvironment) -> None:
        self._sessions[session_id] = environment

    async def get(self, session_id: str) -> LocalGitEnvironment:
        """Look up the environment for ``session_id``.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"No execution environment for session '{session_id}'.") from None
