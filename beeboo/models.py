# =============================================================================
# beeboo/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Every value that crosses a layer boundary is one of these dataclasses:
#
#   ApiConfig         where to send requests and with which key
#   ApiResponse       one HTTP result (status, parsed body, raw text)
#   Envelope          an ApiResponse body split into payload / error message
#   ParameterSpec     one declared tool argument (string, enum, string array)
#   ToolSpec          a registered tool: name, description, schema, handler
#   ToolResult        what a handler returns: text plus optional data
#   ProtocolResponse  what the dispatcher returns across the MCP boundary
#
# The frozen ones are created once and never changed.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


# -----------------------------------------------------------------------------
# Transport-level models
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for the BeeBoo API."""

    api_key: str
    api_url: str                       # base URL, no trailing slash


@dataclass(frozen=True)
class ApiResponse:
    """The outcome of one HTTP request.

    ``data`` is the JSON-decoded body, or the raw text when the body is not
    JSON.  Owned by the handler call that made the request.
    """

    status: int
    data: Any
    raw: str


@dataclass(frozen=True)
class Envelope:
    """A response body unwrapped into its payload and error message."""

    payload: Any
    error_message: str


# -----------------------------------------------------------------------------
# Tool schema models
# -----------------------------------------------------------------------------
STRING = "string"
ENUM = "enum"
STRING_ARRAY = "string_array"

PARAMETER_KINDS = (STRING, ENUM, STRING_ARRAY)


@dataclass(frozen=True)
class ParameterSpec:
    """One declared tool argument.

    ``kind`` is one of ``string``, ``enum`` or ``string_array``.  Only enum
    parameters carry ``values``.  Optional parameters have no default: when
    the caller leaves them out they are simply absent.
    """

    kind: str
    required: bool = True
    description: str = ""
    values: tuple[str, ...] = ()

    def __post_init__(self):
        if self.kind not in PARAMETER_KINDS:
            raise ValueError(f"Unknown parameter kind: {self.kind!r}")
        if self.kind == ENUM:
            if not self.values:
                raise ValueError("enum parameters need at least one value")
            if len(set(self.values)) != len(self.values):
                raise ValueError(f"enum values must be distinct: {self.values}")
        elif self.values:
            raise ValueError(f"{self.kind} parameters do not take enum values")


@dataclass(frozen=True)
class ToolResult:
    """A handler's answer: human-readable text plus optional structured data."""

    text: str
    data: Any = None


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool.

    ``input_schema`` keeps declaration order, which is the order parameters
    are documented in.  ``structured_key`` names the key list-style tools
    nest their data under in ``structuredContent``.
    """

    name: str
    description: str
    input_schema: Mapping[str, ParameterSpec]
    handler: Callable[..., ToolResult]
    structured_key: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "input_schema", MappingProxyType(dict(self.input_schema)))

    @property
    def required_params(self) -> list[str]:
        return [name for name, param in self.input_schema.items() if param.required]


# -----------------------------------------------------------------------------
# Protocol-level model
# -----------------------------------------------------------------------------
@dataclass
class ProtocolResponse:
    """The only shape returned across the MCP boundary."""

    content: list[dict[str, str]] = field(default_factory=list)
    structured_content: Optional[dict[str, Any]] = None
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str, structured_content: Optional[dict[str, Any]] = None) -> "ProtocolResponse":
        return cls(content=[{"type": "text", "text": text}], structured_content=structured_content)

    @classmethod
    def error(cls, message: str) -> "ProtocolResponse":
        return cls(content=[{"type": "text", "text": f"Error: {message}"}], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(block["text"] for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        """MCP ``CallToolResult`` shape; absent fields are left out."""
        result: dict[str, Any] = {"content": list(self.content)}
        if self.structured_content is not None:
            result["structuredContent"] = self.structured_content
        if self.is_error:
            result["isError"] = True
        return result
