"""Export the exception hierarchy used across registration, invocation and environment paths."""

from .exceptions import (
    PlannerActionError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
    ToolInvocationError,
    ToolSchemaError,
    BatchPreconditionError,
    EnvironmentCommandError,
    SessionNotFoundError,
)

__all__ = [
    "PlannerActionError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ToolInvocationError",
    "ToolSchemaError",
    "BatchPreconditionError",
    "EnvironmentCommandError",
    "SessionNotFoundError",
]
