from .models import ToolDefinition, ToolOutput, ToolCall, ToolInvocationResult, ActionBatch
from .registry import ToolRegistry, build_tool_definition
from .execution import InvocationExecutor, BatchCoordinator, SideEffectGuard, ResultFormatter
from .schema import SchemaValidator, SchemaRenderer

__all__ = [
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
]
