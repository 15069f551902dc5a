import shutil
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

import pytest

from planner_actions.action_core import CommandResult, SessionNotFoundError

CommandHandler = Callable[[Union[str, Sequence[str]], Optional[str]], CommandResult]


class FakeEnvironment:
    """In-memory stand-in for a sandbox session.

    Commands are answered by ``command_handler``; a handler may add entries to
    ``changed`` to simulate a tool that writes files.
    """

    def __init__(self, changed: Optional[List[str]] = None, command_handler: Optional[CommandHandler] = None) -> None:
        self.changed: List[str] = list(changed or [])
        self.command_handler = command_handler
        self.commands: List[Tuple[Union[str, Sequence[str]], Optional[str], Optional[float]]] = []
        self.changed_paths_calls: List[str] = []
        self.revert_calls: List[str] = []

    async def changed_paths(self, path: str) -> List[str]:
        self.changed_paths_calls.append(path)
        return list(self.changed)

    async def revert_all(self, path: str) -> None:
        self.revert_calls.append(path)
        self.changed = []

    async def run_command(
        self,
        command: Union[str, Sequence[str]],
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        self.commands.append((command, cwd, timeout))
        if self.command_handler is not None:
            return self.command_handler(command, cwd)
        return CommandResult(exit_code=0, output="")


class FakeSessionResolver:
    def __init__(self, environment: FakeEnvironment, session_id: str = "session-1") -> None:
        self.environment = environment
        self.session_id = session_id
        self.lookups: List[str] = []

    async def get(self, session_id: str) -> FakeEnvironment:
        self.lookups.append(session_id)
        if session_id != self.session_id:
            raise SessionNotFoundError(f"No execution environment for session '{session_id}'.")
        return self.environment


@pytest.fixture
def fake_environment() -> FakeEnvironment:
    return FakeEnvironment()


@pytest.fixture
def session_resolver(fake_environment: FakeEnvironment) -> FakeSessionResolver:
    return FakeSessionResolver(fake_environment)


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A git repository with one committed file, README.md."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "--quiet")
    _git(repo, "config", "user.email", "planner@example.com")
    _git(repo, "config", "user.name", "Planner Tests")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("# Demo\n\nTODO: write docs\n")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "--quiet", "-m", "initial")
    return repo
