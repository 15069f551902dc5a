"""Runtime configuration for the planner action coordinator."""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "PLANNER_ACTIONS_"

# Roughly 4k tokens per tool result, which keeps a batch of planner reads
# well inside the planner model's context window.
DEFAULT_MAX_OUTPUT_CHARS = 15_000


class ActionConfig(BaseModel):
    """
    Configuration parameters for executing a batch of planner tool calls.

    Attributes:
        max_output_chars: Upper bound for the content of each tool result.
        tool_timeout: Optional per-invocation timeout in seconds. A call that runs
                      longer fails with an error result; None disables the timeout.
        shell_timeout: Default timeout in seconds for commands run by the shell tool.
        search_max_columns: Longest line (in bytes) the search tool prints before eliding it.
    """

    max_output_chars: int = Field(default=DEFAULT_MAX_OUTPUT_CHARS, ge=200)
    tool_timeout: Optional[float] = Field(default=None, gt=0)
    shell_timeout: float = Field(default=120.0, gt=0)
    search_max_columns: int = Field(default=300, ge=50)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ActionConfig":
        """Build a config from ``PLANNER_ACTIONS_*`` environment variables.

        Args:
            env_file: Optional path to a .env file. Without it, python-dotenv searches
                      upwards from the working directory. Existing variables win.

        Returns:
            The validated configuration. Unset variables keep their defaults.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        values = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw.strip() != "":
                values[field_name] = raw.strip()
        return cls.model_validate(values)
