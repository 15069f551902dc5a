"""Execution of a single planner tool call with fault isolation."""

from __future__ import annotations

import asyncio
import inspect
import json
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ...exceptions import ToolInvocationError, ToolNotFoundError, ToolSchemaError
from ...logger import get_logger
from ..models import ToolCall, ToolDefinition, ToolInvocationResult, ToolOutput
from ..registry import ToolRegistry
from ..schema import SchemaRenderer
from .formatter import ResultFormatter

logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class InvocationExecutor:
    """Resolves one tool call, invokes it once, and classifies the outcome.

    ``execute`` never raises: unknown tools, rejected arguments and tool faults
    all come back as results with ``status="error"``.
    """

    def __init__(
        self,
        formatter: Optional[ResultFormatter] = None,
        tool_timeout: Optional[float] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            formatter: Bounds the content of every result. Defaults to a formatter with the default bound.
            tool_timeout: Optional timeout in seconds for a single invocation. None waits indefinitely.
        """
        self.formatter = formatter or ResultFormatter()
        self.tool_timeout = tool_timeout

    async def execute(self, call: ToolCall, registry: ToolRegistry) -> ToolInvocationResult:
        """Execute a single tool call.

        Args:
            call: The tool call issued by the planner.
            registry: The registry of the current batch.

        Returns:
            The result, carrying ``call.call_id`` (or an empty string) and ``call.name``.
        """
        try:
            tool_def = registry.resolve(call.name)
        except ToolNotFoundError:
            logger.error("Unknown tool: %s", call.name)
            return self._build_result(call, "error", f"Unknown tool: {call.name}")

        logger.info("Executing planner tool action '%s' (ID: %s) with args: %s", call.name, call.call_id, call.args)

        try:
            output = await self._invoke(tool_def, call.args)
            status, content = output.status, output.result
        except ToolSchemaError:
            logger.error(
                "Received tool input did not match expected schema for '%s'. Args: %s, expected schema: %s",
                call.name,
                call.args,
                SchemaRenderer.schema_to_string(tool_def.parameters),
            )
            status, content = "error", SchemaRenderer.format_bad_args_error(tool_def.parameters, call.args)
        except Exception as exc:
            logger.error("Failed to call tool '%s': %s", call.name, exc, exc_info=True)
            message = str(exc) or UNKNOWN_ERROR_MESSAGE
            status, content = "error", f'FAILED TO CALL TOOL: "{call.name}"\n\nError: {message}'

        return self._build_result(call, status, content)

    async def _invoke(self, tool_def: ToolDefinition, raw_args: Any) -> ToolOutput:
        """Normalize and validate the arguments, run the tool, and normalize its output.

        Raises:
            ToolSchemaError: If the arguments do not match the tool's input schema.
            ToolInvocationError: If the invocation times out.
        """
        function_args = self._normalize_function_args(tool_def.name, raw_args)

        if tool_def.args_model:
            try:
                validated_args = tool_def.args_model(**function_args)
            except ValidationError as validation_error:
                raise ToolSchemaError(f"Arguments for '{tool_def.name}' did not match its schema.") from validation_error
            # Keep nested models as instances; the tool function receives them typed
            function_args = {name: getattr(validated_args, name) for name in type(validated_args).model_fields}
        else:
            self._check_signature(tool_def, function_args)

        raw_output = await self._execute_tool(tool_def, function_args)
        return self._normalize_output(raw_output)

    @staticmethod
    def _check_signature(tool_def: ToolDefinition, function_args: Dict[str, Any]) -> None:
        """Check the arguments against the signature of a tool registered without an args model.

        Raises:
            ToolSchemaError: If the arguments cannot be bound to the tool function.
        """
        try:
            signature = inspect.signature(tool_def.func)
        except (TypeError, ValueError):
            # No introspectable signature; the call itself decides
            return
        try:
            signature.bind(**function_args)
        except TypeError as exc:
            raise ToolSchemaError(f"Arguments for '{tool_def.name}' did not match its signature: {exc}") from exc

    @staticmethod
    def _normalize_function_args(tool_name: str, raw_args: Any) -> Dict[str, Any]:
        """Normalize tool arguments into a dictionary.

        Handles dictionaries, JSON strings, or None values.

        Raises:
            ToolSchemaError: If the arguments cannot be read as a JSON object.
        """
        if raw_args is None or raw_args == "":
            return {}

        if isinstance(raw_args, Mapping):
            return dict(raw_args)

        if isinstance(raw_args, str):
            try:
                parsed = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise ToolSchemaError(f"Arguments for '{tool_name}' are not valid JSON.") from exc

            if parsed is None:
                return {}
            if not isinstance(parsed, dict):
                raise ToolSchemaError(f"Arguments for '{tool_name}' must decode to a JSON object.")
            return parsed

        raise ToolSchemaError(f"Arguments for '{tool_name}' must be an object, got {type(raw_args).__name__}.")

    async def _execute_tool(self, tool_def: ToolDefinition, function_args: Dict[str, Any]) -> Any:
        """Execute the tool function, handling async/sync and the optional timeout.

        Raises:
            ToolInvocationError: If execution times out.
        """
        tool_function = tool_def.func
        if inspect.iscoroutinefunction(tool_function):
            awaitable = tool_function(**function_args)
        else:
            awaitable = asyncio.to_thread(tool_function, **function_args)

        try:
            result = await asyncio.wait_for(awaitable, timeout=self.tool_timeout)
        except asyncio.TimeoutError as exc:
            raise ToolInvocationError(f"Tool execution timed out after {self.tool_timeout} seconds.") from exc

        if inspect.isawaitable(result):
            # Sync callables may hand back a coroutine (e.g. functools.partial of an async function)
            result = await asyncio.wait_for(result, timeout=self.tool_timeout)
        return result

    @staticmethod
    def _normalize_output(raw_output: Any) -> ToolOutput:
        if isinstance(raw_output, ToolOutput):
            return raw_output
        if isinstance(raw_output, Mapping) and "result" in raw_output:
            return ToolOutput.model_validate(
                {"result": str(raw_output["result"]), "status": raw_output.get("status", "success")}
            )
        if raw_output is None:
            return ToolOutput(result="")
        return ToolOutput(result=str(raw_output))

    def _build_result(self, call: ToolCall, status: Any, content: str) -> ToolInvocationResult:
        return ToolInvocationResult(
            correlation_id=call.call_id or "",
            name=call.name,
            status=status,
            content=self.formatter.truncate(content),
        )
