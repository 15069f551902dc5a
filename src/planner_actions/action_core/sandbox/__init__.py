"""Execution environment abstractions and the local git-backed implementation."""

from .base import ExecutionEnvironment, SessionResolver
from .models import CommandResult, SideEffectReport
from .local import LocalGitEnvironment, LocalSessionResolver

__all__ = [
    "ExecutionEnvironment",
    "SessionResolver",
    "CommandResult",
    "SideEffectReport",
    "LocalGitEnvironment",
    "LocalSessionResolver",
]
