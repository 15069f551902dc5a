import shutil
from pathlib import Path

import pytest

from planner_actions.action_core import (
    ActionRunner,
    AssistantMessage,
    EnvironmentCommandError,
    LocalGitEnvironment,
    LocalSessionResolver,
    SessionNotFoundError,
    ToolCall,
)
from planner_actions.action_core.sandbox.local import TIMEOUT_EXIT_CODE, _parse_porcelain


def test_parse_porcelain_handles_renames_and_untracked() -> None:
    output = " M src/app.py\n?? notes.txt\nR  old.py -> new.py\nD  gone.py\n"

    assert _parse_porcelain(output) == ["src/app.py", "notes.txt", "new.py", "gone.py"]


@pytest.mark.asyncio
async def test_run_command_captures_output_and_exit_code(tmp_path: Path) -> None:
    environment = LocalGitEnvironment(tmp_path)

    ok = await environment.run_command("echo hello")
    failed = await environment.run_command("exit 3")

    assert ok.ok
    assert ok.output == "hello\n"
    assert failed.exit_code == 3


@pytest.mark.asyncio
async def test_run_command_timeout(tmp_path: Path) -> None:
    environment = LocalGitEnvironment(tmp_path)

    result = await environment.run_command(["sleep", "5"], timeout=0.1)

    assert result.exit_code == TIMEOUT_EXIT_CODE
    assert "timed out" in result.output


@pytest.mark.asyncio
async def test_clean_repo_has_no_changed_paths(git_repo: Path) -> None:
    environment = LocalGitEnvironment(git_repo)

    assert await environment.changed_paths(str(git_repo)) == []


@pytest.mark.asyncio
async def test_revert_all_restores_the_tree(git_repo: Path) -> None:
    environment = LocalGitEnvironment(git_repo)
    (git_repo / "README.md").write_text("changed\n")
    (git_repo / "scratch.txt").write_text("new file\n")

    changed = await environment.changed_paths(".")
    await environment.revert_all(".")

    assert sorted(changed) == ["README.md", "scratch.txt"]
    assert (git_repo / "README.md").read_text() == "# Demo\n\nTODO: write docs\n"
    assert not (git_repo / "scratch.txt").exists()
    assert await environment.changed_paths(".") == []
    stashes = await environment.run_command(["git", "stash", "list"])
    assert stashes.output == ""


@pytest.mark.asyncio
async def test_git_failure_raises(tmp_path: Path) -> None:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    environment = LocalGitEnvironment(tmp_path)

    with pytest.raises(EnvironmentCommandError):
        await environment.changed_paths(str(tmp_path))


@pytest.mark.asyncio
async def test_session_resolver() -> None:
    environment = LocalGitEnvironment("/tmp")
    resolver = LocalSessionResolver({"s1": environment})

    assert await resolver.get("s1") is environment
    with pytest.raises(SessionNotFoundError):
        await resolver.get("s2")


@pytest.mark.asyncio
async def test_shell_write_is_reverted_end_to_end(git_repo: Path) -> None:
    resolver = LocalSessionResolver({"s1": LocalGitEnvironment(git_repo)})
    message = AssistantMessage(
        tool_calls=[
            ToolCall(name="shell", args={"command": ["echo", "oops", ">", "oops.txt"]}, call_id="1"),
            ToolCall(name="shell", args={"command": ["cat", "README.md"]}, call_id="2"),
        ]
    )

    messages = await ActionRunner(resolver).take_actions(message, session_id="s1", working_directory=str(git_repo))

    assert not (git_repo / "oops.txt").exists()
    assert all(m.content.startswith("**WARNING**") for m in messages)
    assert messages[1].content.endswith("# Demo\n\nTODO: write docs\n")


@pytest.mark.asyncio
async def test_search_tool_against_real_repo(git_repo: Path) -> None:
    if shutil.which("rg") is None:
        pytest.skip("ripgrep is not installed")
    resolver = LocalSessionResolver({"s1": LocalGitEnvironment(git_repo)})
    message = AssistantMessage(tool_calls=[ToolCall(name="search", args={"query": "TODO"}, call_id="1")])

    messages = await ActionRunner(resolver).take_actions(message, session_id="s1", working_directory=str(git_repo))

    assert messages[0].status == "success"
    assert "README.md:3:TODO: write docs" in messages[0].content


@pytest.mark.asyncio
async def test_revert_all_keeps_existing_stash(git_repo: Path) -> None:
    environment = LocalGitEnvironment(git_repo)
    (git_repo / "README.md").write_text("work in progress\n")
    await environment.run_command(["git", "stash", "push", "--quiet", "-m", "user work"])
    (git_repo / "scratch.txt").write_text("planner output\n")

    await environment.revert_all(".")

    stashes = await environment.run_command(["git", "stash", "list"])
    assert stashes.output.count("\n") == 1
    assert "user work" in stashes.output
    assert not (git_repo / "scratch.txt").exists()


@pytest.mark.asyncio
async def test_revert_all_with_nothing_to_stash_keeps_existing_stash(git_repo: Path) -> None:
    environment = LocalGitEnvironment(git_repo)
    (git_repo / "README.md").write_text("work in progress\n")
    await environment.run_command(["git", "stash", "push", "--quiet", "-m", "user work"])

    await environment.revert_all(".")

    stashes = await environment.run_command(["git", "stash", "list"])
    assert "user work" in stashes.output


@pytest.mark.asyncio
async def test_session_resolver_add() -> None:
    environment = LocalGitEnvironment("/tmp")
    resolver = LocalSessionResolver()

    resolver.add("s1", environment)

    assert await resolver.get("s1") is environment
