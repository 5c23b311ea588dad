"""ParameterSpec -> JSON Schema translation for tools/list."""

from typing import Any

from beeboo.models import ENUM, STRING_ARRAY, ParameterSpec, ToolSpec


def parameter_schema(param: ParameterSpec) -> dict[str, Any]:
    """JSON Schema for one parameter.

    string       -> {"type": "string"}
    enum         -> {"type": "string", "enum": [...]}
    string_array -> {"type": "array", "items": {"type": "string"}}
    """
    if param.kind == ENUM:
        schema: dict[str, Any] = {"type": "string", "enum": list(param.values)}
    elif param.kind == STRING_ARRAY:
        schema = {"type": "array", "items": {"type": "string"}}
    else:
        schema = {"type": "string"}

    if param.description:
        schema["description"] = param.description
    return schema


def input_schema(spec: ToolSpec) -> dict[str, Any]:
    """The object schema advertised as a tool's ``inputSchema``."""
    return {
        "type": "object",
        "properties": {name: parameter_schema(param) for name, param in spec.input_schema.items()},
        "required": spec.required_params,
    }


def tool_definition(spec: ToolSpec) -> dict[str, Any]:
    """MCP tool metadata: name, description and input schema."""
    return {
        "name": spec.name,
        "description": spec.description,
        "inputSchema": input_schema(spec),
    }
