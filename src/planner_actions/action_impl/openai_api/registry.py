"""OpenAI function-tool declarations for the planner's tools."""

from typing import Any, Dict, List

from planner_actions.action_core.tools.registry import ToolRegistry


class OpenAIToolRegistry(ToolRegistry):
    """
    A ToolRegistry that can describe its tools in the OpenAI ``tools`` request format.
    """

    @property
    def tool_object(self) -> List[Dict[str, Any]] | None:
        """
        Generates a list of tool definitions suitable for the OpenAI API.

        Returns:
            A list of tool dictionaries, or None if no tools are registered.
        """
        if not self.tools:
            return None

        tools_list = []
        for tool in self.tools.values():
            parameters = tool.parameters or {"type": "object", "properties": {}}
            tools_list.append(
                {
                    "type": "function",
                    "function": {
                        "name": tool.name,
                        "description": tool.description,
                        "parameters": parameters,
                    },
                }
            )
        return tools_list
