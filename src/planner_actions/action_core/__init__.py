"""Public exports for the planner action core."""

from .logger import get_logger, setup_logging
from .config import ActionConfig
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
from .messages import BaseMessage, UserMessage, AssistantMessage, ToolMessage
from .tools import (
    ToolDefinition,
    ToolOutput,
    ToolCall,
    ToolInvocationResult,
    ActionBatch,
    ToolRegistry,
    build_tool_definition,
    InvocationExecutor,
    BatchCoordinator,
    SideEffectGuard,
    ResultFormatter,
    SchemaValidator,
    SchemaRenderer,
)
from .tools.builtin import ActionContext, PlannerNotes, PLANNER_TOOL_FACTORIES
from .sandbox import (
    ExecutionEnvironment,
    SessionResolver,
    CommandResult,
    SideEffectReport,
    LocalGitEnvironment,
    LocalSessionResolver,
)
from .runner import ActionRunner

__all__ = [
    "get_logger",
    "setup_logging",
    "ActionConfig",
    "PlannerActionError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ToolInvocationError",
    "ToolSchemaError",
    "BatchPreconditionError",
    "EnvironmentCommandError",
    "SessionNotFoundError",
    "BaseMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "ToolDefinition",
    "ToolOutput",
    "ToolCall",
    "ToolInvocationResult",
    "ActionBatch",
    "ToolRegistry",
    "build_tool_definition",
    "InvocationExecutor",
    "BatchCoordinator",
    "SideEffectGuard",
    "ResultFormatter",
    "SchemaValidator",
    "SchemaRenderer",
    "ActionContext",
    "PlannerNotes",
    "PLANNER_TOOL_FACTORIES",
    "ExecutionEnvironment",
    "SessionResolver",
    "CommandResult",
    "SideEffectReport",
    "LocalGitEnvironment",
    "LocalSessionResolver",
    "ActionRunner",
]
