"""Render tool input schemas as compact, human-readable text.

The planner model sees this text when one of its calls does not match a
tool's input schema, so it can correct the arguments on its next turn.
"""

import json
from typing import Any, Dict, List, Mapping, Optional

BAD_ARGS_HEADER = "Received tool input did not match expected schema."


class SchemaRenderer:
    """Turns JSON schemas into an indented, TypeScript-like outline."""

    INDENT = "  "

    @classmethod
    def schema_to_string(cls, schema: Optional[Mapping[str, Any]]) -> str:
        """Render a JSON schema.

        Args:
            schema: The (sanitized) JSON schema of a tool's parameters.

        Returns:
            The rendered outline, or ``{}`` when the tool takes no parameters.
        """
        if not schema:
            return "{}"
        return cls._render(schema, depth=0)

    @classmethod
    def format_bad_args_error(cls, schema: Optional[Mapping[str, Any]], args: Any) -> str:
        """Build the error content for a call whose arguments were rejected.

        Args:
            schema: The tool's parameter schema.
            args: The arguments the planner sent.

        Returns:
            The expected schema and the received arguments, side by side.
        """
        return (
            f"{BAD_ARGS_HEADER}\n\n"
            f"Expected schema:\n{cls.schema_to_string(schema)}\n\n"
            f"Received arguments:\n{cls._dump_args(args)}\n\n"
            "Call the tool again with arguments that match the expected schema."
        )

    @classmethod
    def _render(cls, node: Mapping[str, Any], depth: int) -> str:
        if "enum" in node:
            return " | ".join(json.dumps(value) for value in node["enum"])
        if "const" in node:
            return json.dumps(node["const"])

        for key in ("anyOf", "oneOf"):
            if key in node:
                return " | ".join(cls._render(option, depth) for option in node[key])

        node_type = node.get("type")
        if isinstance(node_type, list):
            return " | ".join(cls._render({**node, "type": t}, depth) for t in node_type)
        if node_type == "array":
            items = node.get("items")
            return f"array<{cls._render(items, depth) if items else 'any'}>"
        if node_type == "object" or "properties" in node:
            return cls._render_object(node, depth)
        return str(node_type or "any")

    @classmethod
    def _render_object(cls, node: Mapping[str, Any], depth: int) -> str:
        properties: Dict[str, Any] = node.get("properties") or {}
        if not properties:
            return "object"

        required = set(node.get("required") or [])
        pad = cls.INDENT * (depth + 1)
        lines: List[str] = ["{"]
        for name, prop in properties.items():
            marker = "" if name in required else "?"
            line = f"{pad}{name}{marker}: {cls._render(prop, depth + 1)}"
            if "default" in prop:
                line += f" (default: {json.dumps(prop['default'], default=str)})"
            if prop.get("description"):
                line += f" - {prop['description']}"
            lines.append(line)
        lines.append(f"{cls.INDENT * depth}}}")
        return "\n".join(lines)

    @staticmethod
    def _dump_args(args: Any) -> str:
        if isinstance(args, str):
            return args
        try:
            return json.dumps(args, indent=2, default=str)
        except (TypeError, ValueError):
            return repr(args)
