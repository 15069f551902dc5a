"""
Custom exception classes for the planner action system.

This module defines the hierarchy of exceptions raised while building tool
registries, invoking tools, and talking to the execution environment. Only
batch preconditions and environment failures reach the caller; per-call
faults are converted into error results by the executor.
"""


class PlannerActionError(Exception):
    """Base exception for all planner action errors."""

    pass


class ToolRegistrationError(PlannerActionError):
    """Raised when there is an error registering a tool, e.g. a name collision."""

    pass


class ToolNotFoundError(PlannerActionError):
    """Raised when a requested tool is not found in the registry."""

    pass


class ToolValidationError(PlannerActionError):
    """Raised when a tool definition (signature, docstring, schema) is invalid."""

    pass


class ToolInvocationError(PlannerActionError):
    """Raised when a tool fails during execution."""

    pass


class ToolSchemaError(ToolInvocationError):
    """Raised when the arguments of a call do not match the tool's input schema."""

    pass


class BatchPreconditionError(PlannerActionError):
    """Raised when a batch cannot start: wrong message kind or no tool calls."""

    pass


class EnvironmentCommandError(PlannerActionError):
    """Raised when a command against the execution environment fails."""

    pass


class SessionNotFoundError(PlannerActionError):
    """Raised when a session identifier cannot be resolved to an environment."""

    pass
