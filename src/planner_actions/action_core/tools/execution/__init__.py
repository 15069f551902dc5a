"""Tool execution: single invocations, batch fan-out, side-effect guard and result formatting."""

from .formatter import ResultFormatter, TRUNCATION_MARKER
from .executor import InvocationExecutor
from .coordinator import BatchCoordinator
from .guard import SideEffectGuard, READ_ONLY_WARNING_TEMPLATE

__all__ = [
    "ResultFormatter",
    "TRUNCATION_MARKER",
    "InvocationExecutor",
    "BatchCoordinator",
    "SideEffectGuard",
    "READ_ONLY_WARNING_TEMPLATE",
]
