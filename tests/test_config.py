import pytest
from pydantic import ValidationError

from planner_actions.action_core import ActionConfig
from planner_actions.action_core.config import DEFAULT_MAX_OUTPUT_CHARS


def test_defaults() -> None:
    config = ActionConfig()

    assert config.max_output_chars == DEFAULT_MAX_OUTPUT_CHARS
    assert config.tool_timeout is None
    assert config.shell_timeout == 120.0


def test_bounds_are_validated() -> None:
    with pytest.raises(ValidationError):
        ActionConfig(max_output_chars=10)
    with pytest.raises(ValidationError):
        ActionConfig(tool_timeout=0)


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLANNER_ACTIONS_MAX_OUTPUT_CHARS", "5000")
    monkeypatch.setenv("PLANNER_ACTIONS_TOOL_TIMEOUT", "30")

    config = ActionConfig.from_env()

    assert config.max_output_chars == 5000
    assert config.tool_timeout == 30.0
    assert config.shell_timeout == 120.0


def test_from_env_loads_dotenv_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # setenv then delenv so the value loaded from the file is removed again on teardown
    monkeypatch.setenv("PLANNER_ACTIONS_SHELL_TIMEOUT", "1")
    monkeypatch.delenv("PLANNER_ACTIONS_SHELL_TIMEOUT")
    env_file = tmp_path / ".env"
    env_file.write_text("PLANNER_ACTIONS_SHELL_TIMEOUT=45\n")

    config = ActionConfig.from_env(str(env_file))

    assert config.shell_timeout == 45.0
