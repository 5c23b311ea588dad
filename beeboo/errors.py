# =============================================================================
# beeboo/errors.py  —  Exception Taxonomy
# =============================================================================
#
#   BeeBooError
#   ├── ConfigError          missing configuration (fatal at startup)
#   ├── NetworkError         connection could not be made or was dropped
#   │   └── RequestTimeoutError
#   ├── HttpError            non-2xx response, message extracted from body
#   │   └── NotFoundError    404 on a lookup-by-id tool
#   ├── ValidationError      tool arguments do not match the declared schema
#   └── UnknownToolError     tool name is not registered
#
# Everything except ConfigError is per-call: the dispatcher turns it into an
# MCP error response and the server keeps running.
# =============================================================================

from typing import Optional


class BeeBooError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(BeeBooError):
    """Required configuration (the API key) is absent."""


class NetworkError(BeeBooError):
    """The HTTP request never produced a response."""


class RequestTimeoutError(NetworkError):
    """The HTTP request exceeded the fixed timeout."""


class HttpError(BeeBooError):
    """The BeeBoo API answered with a non-success status."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class NotFoundError(HttpError):
    """A lookup by id came back 404."""

    def __init__(self, message: str):
        super().__init__(404, message)


class ValidationError(BeeBooError):
    """Tool arguments failed schema validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UnknownToolError(BeeBooError):
    """The protocol asked for a tool that is not registered."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
