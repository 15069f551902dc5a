"""Tool registry and tool definition generation."""

import inspect
from typing import Callable, Dict, Any, Iterable, List, Union, Optional, cast

import jsonref  # type: ignore
from pydantic import ConfigDict, create_model

from ..models import ToolDefinition
from ..schema import ToolParameterFactory, SchemaValidator
from ...exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    Maps tool names to their definitions for the duration of one batch.

    The registry is rebuilt for every batch from the tools available in the
    current phase and keeps no state of its own across batches. State a tool
    needs (e.g. accumulated notes) lives in whatever the tool closes over.
    """

    def __init__(self) -> None:
        """Initialize an empty ToolRegistry."""
        self.tools: Dict[str, ToolDefinition] = {}

    @classmethod
    def from_definitions(cls, definitions: Iterable[Union[ToolDefinition, Callable]]) -> "ToolRegistry":
        """Build a registry from a list of definitions (or plain tool functions).

        Args:
            definitions: The tools available in the current phase.

        Returns:
            A registry holding every definition.

        Raises:
            ToolRegistrationError: If two definitions share a name.
        """
        registry = cls()
        for definition in definitions:
            registry.register(definition)
        return registry

    def register(
        self,
        name_or_tool: Union[str, ToolDefinition, Callable],
        description: Optional[str] = None,
        func: Optional[Callable] = None,
        parameters: Optional[Any] = None,
    ) -> None:
        """
        Register a new tool.

        This method allows registering a tool either by providing a `ToolDefinition` object
        directly, by providing the individual components (name, description, function, parameters),
        or by providing a function (Callable) to automatically generate the definition.

        Args:
            name_or_tool: Either a `ToolDefinition` object, the name of the tool (str), or a Callable.
            description: A brief description of what the tool does. Required if `name_or_tool` is a string and parameters are provided.
            func: The callable implementing the tool's logic. Required if `name_or_tool` is a string.
            parameters: A schema defining the tool's input parameters. If None, it will be inferred from `func`.

        Raises:
            ToolRegistrationError: If individual arguments are missing or if the tool already exists.
        """
        if isinstance(name_or_tool, ToolDefinition):
            tool = name_or_tool
        elif callable(name_or_tool):
            tool = build_tool_definition(name_or_tool, description=description)
        else:
            if func is None:
                raise ToolRegistrationError("If passing name as string, func is required.")

            if parameters is None:
                tool = build_tool_definition(func, name=name_or_tool, description=description)
            else:
                if description is None:
                    raise ToolRegistrationError("If passing name and parameters, description is required.")
                tool = ToolDefinition(name=name_or_tool, description=description, func=func, parameters=parameters)

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.debug("Registered tool '%s'.", tool.name)

    def unregister(self, tool_name: str) -> None:
        """Unregister a tool from the registry.

        Raises:
            ToolNotFoundError: If the tool does not exist in the registry.
        """
        if tool_name in self.tools:
            del self.tools[tool_name]
            logger.debug("Unregistered tool '%s'.", tool_name)
        else:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the registry.")

    def resolve(self, tool_name: str) -> ToolDefinition:
        """Look up a tool by name.

        Args:
            tool_name: The name the planner used in its call.

        Returns:
            The registered definition.

        Raises:
            ToolNotFoundError: If no tool with that name is registered.
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the registry.") from None

    def tool(self, func: Callable) -> Callable:
        """A decorator to turn a function into a planner tool.

        Args:
            func: The function to decorate.

        Returns:
            The original function, after registering it as a tool.
        """
        self.register(func)
        return func

    @property
    def names(self) -> List[str]:
        return list(self.tools)

    @property
    def implementations(self) -> Dict[str, Callable]:
        """Returns a dictionary mapping tool names to their callables."""
        return {name: tool.func for name, tool in self.tools.items()}

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self.tools

    def __len__(self) -> int:
        return len(self.tools)


def build_tool_definition(
    func: Callable, name: Optional[str] = None, description: Optional[str] = None
) -> ToolDefinition:
    """Generate a ToolDefinition from a callable.

    Args:
        func: The function to generate a definition for.
        name: Optional name override for the tool.
        description: Optional description override for the tool.

    Returns:
        A ToolDefinition object containing the tool's metadata, schema and args model.

    Raises:
        ToolValidationError: If the function is missing a docstring or parameter descriptions,
            or if its parameters form a recursive schema.
    """
    tool_name = name or func.__name__
    if description is None:
        description = _get_docstring_from_func(func, tool_name)

    signature = inspect.signature(func)
    fields = _build_fields(signature, tool_name)

    # Unknown keys are rejected, matching the additionalProperties: false the planner is shown
    dynamic_params_model = create_model(
        f"{tool_name}Params",
        __config__=ConfigDict(extra="forbid"),
        **cast(Dict[str, Any], fields),
    )
    raw_schema = dynamic_params_model.model_json_schema()
    SchemaValidator.assert_no_recursive_refs(raw_schema)

    # proxies=False ensures we get a plain dict back, not JsonRef objects
    parameters_schema = jsonref.replace_refs(raw_schema, proxies=False)
    parameters_schema = SchemaValidator.sanitize_schema(parameters_schema)

    return ToolDefinition(
        name=tool_name,
        description=description,
        func=func,
        parameters=parameters_schema,
        args_model=dynamic_params_model,
    )


def _get_docstring_from_func(func: Callable, tool_name: str) -> str:
    doc = inspect.getdoc(func)
    if not doc:
        msg = f"Tool '{tool_name}' missing docstring. The planner needs a description of what the tool does."
        logger.error(msg)
        raise ToolValidationError(msg)
    return doc


def _build_fields(signature: inspect.Signature, tool_name: str) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for param_name, param in signature.parameters.items():
        if param_name == "self":
            continue
        ft = ToolParameterFactory.build_field_tuple(param_name=param_name, param=param, tool_name=tool_name)
        fields[param_name] = (ft.annotation, ft.field)
    return fields
