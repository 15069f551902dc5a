import json

from planner_actions.action_core.tools.schema import SchemaRenderer

SHELL_SCHEMA = {
    "type": "object",
    "properties": {
        "command": {"type": "array", "items": {"type": "string"}, "description": "The command to run"},
        "workdir": {"type": "string", "description": "Where to run it", "default": None},
        "mode": {"enum": ["fast", "slow"]},
    },
    "required": ["command"],
    "additionalProperties": False,
}


def test_schema_to_string_renders_fields() -> None:
    rendered = SchemaRenderer.schema_to_string(SHELL_SCHEMA)

    assert rendered.startswith("{")
    assert rendered.endswith("}")
    assert "  command: array<string> - The command to run" in rendered
    assert "  workdir?: string (default: null) - Where to run it" in rendered
    assert '  mode?: "fast" | "slow"' in rendered


def test_schema_to_string_nested_objects_are_indented() -> None:
    schema = {
        "type": "object",
        "properties": {
            "range": {
                "type": "object",
                "properties": {"start": {"type": "integer"}},
                "required": ["start"],
            }
        },
    }
    rendered = SchemaRenderer.schema_to_string(schema)

    assert "  range?: {\n    start: integer\n  }" in rendered


def test_schema_to_string_without_schema() -> None:
    assert SchemaRenderer.schema_to_string(None) == "{}"
    assert SchemaRenderer.schema_to_string({}) == "{}"


def test_format_bad_args_error_echoes_schema_and_args() -> None:
    args = {"command": "ls -la"}
    content = SchemaRenderer.format_bad_args_error(SHELL_SCHEMA, args)

    assert content.startswith("Received tool input did not match expected schema.")
    assert SchemaRenderer.schema_to_string(SHELL_SCHEMA) in content
    assert json.dumps(args, indent=2) in content


def test_format_bad_args_error_keeps_raw_string_args() -> None:
    content = SchemaRenderer.format_bad_args_error(SHELL_SCHEMA, '{"command": ')

    assert 'Received arguments:\n{"command": ' in content
