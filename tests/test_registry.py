import pytest

from beeboo.models import ParameterSpec, ToolResult, ToolSpec
from beeboo_mcp import registry
from beeboo_mcp.schema import input_schema, parameter_schema, tool_definition

EXPECTED_TOOLS = {
    "beeboo_knowledge_search",
    "beeboo_knowledge_add",
    "beeboo_knowledge_list",
    "beeboo_approval_request",
    "beeboo_approval_check",
    "beeboo_approvals_list",
    "beeboo_request_create",
    "beeboo_requests_list",
}


def test_registry_contains_the_eight_beeboo_tools(api):
    tools = registry.build_registry(api)

    assert set(tools) == EXPECTED_TOOLS
    assert all(name == spec.name for name, spec in tools.items())


def test_registry_is_read_only(api):
    tools = registry.build_registry(api)

    with pytest.raises(TypeError):
        tools["extra"] = tools["beeboo_knowledge_list"]
    with pytest.raises(TypeError):
        tools["beeboo_knowledge_add"].input_schema["extra"] = registry.string_param()


def test_make_registry_rejects_duplicate_names():
    spec = ToolSpec(name="dup", description="", input_schema={}, handler=lambda: ToolResult("x"))

    with pytest.raises(ValueError, match="dup"):
        registry.make_registry([spec, spec])


def test_enum_parameters_need_distinct_values():
    with pytest.raises(ValueError):
        registry.enum_param([])
    with pytest.raises(ValueError):
        registry.enum_param(["a", "a"])
    with pytest.raises(ValueError):
        ParameterSpec(kind="string", values=("a",))
    with pytest.raises(ValueError):
        ParameterSpec(kind="number")


def test_parameter_schema_translation():
    assert parameter_schema(registry.string_param("Query")) == {"type": "string", "description": "Query"}
    assert parameter_schema(registry.string_param()) == {"type": "string"}
    assert parameter_schema(registry.enum_param(["low", "high"], "Level")) == {
        "type": "string",
        "enum": ["low", "high"],
        "description": "Level",
    }
    assert parameter_schema(registry.string_array_param("Tags")) == {
        "type": "array",
        "items": {"type": "string"},
        "description": "Tags",
    }


def test_input_schema_lists_only_required_fields(api):
    tools = registry.build_registry(api)

    schema = input_schema(tools["beeboo_request_create"])

    assert schema["type"] == "object"
    assert list(schema["properties"]) == ["title", "description", "priority"]
    assert schema["required"] == ["title"]
    assert schema["properties"]["priority"]["enum"] == ["low", "medium", "high", "critical"]


def test_tool_without_parameters_has_empty_object_schema(api):
    tools = registry.build_registry(api)

    assert tool_definition(tools["beeboo_knowledge_list"]) == {
        "name": "beeboo_knowledge_list",
        "description": "List all knowledge base entries",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    }


def test_status_filters_declare_their_values(api):
    tools = registry.build_registry(api)

    approvals_status = tools["beeboo_approvals_list"].input_schema["status"]
    requests_status = tools["beeboo_requests_list"].input_schema["status"]

    assert approvals_status.values == ("pending", "approved", "rejected")
    assert not approvals_status.required
    assert requests_status.values == ("open", "in_progress", "resolved")
