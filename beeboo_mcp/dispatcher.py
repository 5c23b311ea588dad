# =============================================================================
# beeboo_mcp/dispatcher.py  —  Validate, Invoke, Shape the Response
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. Look the tool up in the registry        -> UnknownToolError
#   2. Validate the raw arguments              -> ValidationError
#   3. Call the handler with the clean args    -> HttpError, NetworkError, ...
#   4. Wrap the ToolResult as a ProtocolResponse
#
# invoke() never raises.  Every failure, expected or not, becomes an error
# response ("Error: <message>", isError) so the MCP connection survives it.
#
# LOGGING goes to stderr through the logging module (stdout is the MCP
# channel).  Requests are CYAN, progress YELLOW, responses GREEN.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional

from beeboo.errors import BeeBooError, UnknownToolError, ValidationError
from beeboo.models import ENUM, STRING, STRING_ARRAY, ParameterSpec, ProtocolResponse, ToolResult, ToolSpec
from beeboo_mcp.schema import tool_definition

logger = logging.getLogger(__name__)

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"


def _log_request(tool_name: str, arguments: Mapping[str, Any]) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, response: ProtocolResponse) -> ProtocolResponse:
    payload = json.dumps(response.to_dict(), separators=(",", ":"), ensure_ascii=False, default=str)
    color = _RED if response.is_error else _GREEN
    logger.info(f"{color}  ← {tool_name} response: {payload}{_RESET}")
    return response


# =============================================================================
# Argument validation
# =============================================================================
def _is_absent(value: Any) -> bool:
    # Optional fields sent as null or "" count as not given.
    return value is None or value == ""


def _check_value(tool_name: str, field: str, param: ParameterSpec, value: Any) -> None:
    if param.kind in (STRING, ENUM) and not isinstance(value, str):
        raise ValidationError(f"Invalid arguments for {tool_name}: '{field}' must be a string", field)

    if param.kind == ENUM and value not in param.values:
        allowed = ", ".join(param.values)
        raise ValidationError(
            f"Invalid arguments for {tool_name}: '{field}' must be one of: {allowed}", field
        )

    if param.kind == STRING_ARRAY and not (
        isinstance(value, list) and all(isinstance(item, str) for item in value)
    ):
        raise ValidationError(
            f"Invalid arguments for {tool_name}: '{field}' must be an array of strings", field
        )


def validate_arguments(spec: ToolSpec, raw_args: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Check ``raw_args`` against ``spec.input_schema``.

    Returns only the declared fields that are present.  Undeclared fields
    are dropped without complaint.  Raises ValidationError naming the first
    offending field, in declaration order.
    """
    if raw_args is None:
        raw_args = {}
    if not isinstance(raw_args, Mapping):
        raise ValidationError(f"Invalid arguments for {spec.name}: arguments must be an object")

    validated: dict[str, Any] = {}
    for field, param in spec.input_schema.items():
        value = raw_args.get(field)

        if param.required:
            if value is None:
                raise ValidationError(f"Invalid arguments for {spec.name}: '{field}' is required", field)
        elif _is_absent(value):
            continue

        _check_value(spec.name, field, param, value)
        validated[field] = value

    return validated


# =============================================================================
# Dispatcher
# =============================================================================
def structured_content(spec: ToolSpec, data: Any) -> Optional[dict[str, Any]]:
    """Shape handler data as the JSON object MCP expects in structuredContent."""
    if data is None:
        return None
    if spec.structured_key:
        return {spec.structured_key: data}
    if isinstance(data, dict):
        return data
    return {"result": data}


class Dispatcher:
    """Routes tool calls through validation and into their handlers."""

    def __init__(self, registry: Mapping[str, ToolSpec]):
        self._registry = registry

    @property
    def registry(self) -> Mapping[str, ToolSpec]:
        return self._registry

    def list_tools(self) -> list[dict[str, Any]]:
        """tools/list payload: one definition per registered tool."""
        return [tool_definition(spec) for spec in self._registry.values()]

    def get_tool(self, tool_name: str) -> ToolSpec:
        spec = self._registry.get(tool_name)
        if spec is None:
            raise UnknownToolError(tool_name)
        return spec

    def invoke(self, tool_name: str, raw_args: Optional[Mapping[str, Any]] = None) -> ProtocolResponse:
        """Run one tool call to completion and return its MCP response."""
        _log_request(tool_name, raw_args if isinstance(raw_args, Mapping) else {})

        try:
            spec = self.get_tool(tool_name)
            arguments = validate_arguments(spec, raw_args)
            result = spec.handler(**arguments)
            if not isinstance(result, ToolResult):
                raise TypeError(f"{tool_name} handler returned {type(result).__name__}, not ToolResult")
        except BeeBooError as exc:
            _log_status(f"{type(exc).__name__}: {exc}")
            return _log_response(tool_name, ProtocolResponse.error(str(exc)))
        except Exception as exc:
            logger.exception("Unexpected failure in %s", tool_name)
            return _log_response(tool_name, ProtocolResponse.error(str(exc) or type(exc).__name__))

        response = ProtocolResponse.from_text(result.text, structured_content(spec, result.data))
        return _log_response(tool_name, response)
