from typing import Optional, Any, Callable, Literal, Type
from pydantic import BaseModel

ToolStatus = Literal["success", "error"]


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool that the planner may call.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        func: The callable (sync or async) that implements the tool's logic.
        parameters: The JSON schema of the tool's input parameters. It is sent to
                    the model and rendered back when a call does not match it.
        args_model: Optional Pydantic model used for validating and coercing arguments.
    """

    name: str
    description: str
    func: Callable
    parameters: Optional[Any] = None
    args_model: Optional[Type[BaseModel]] = None


class ToolOutput(BaseModel):
    """
    What a tool hands back after running.

    A tool can report a semantic failure (``status="error"``) while the call
    mechanics succeeded, e.g. a shell command with a non-zero exit code.

    Attributes:
        result: Text output of the tool.
        status: Outcome reported by the tool itself.
    """

    result: str
    status: ToolStatus = "success"
