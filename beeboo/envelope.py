# =============================================================================
# beeboo/envelope.py  —  Response Envelope Helpers
# =============================================================================
#
# The BeeBoo API wraps payloads as {"data": ...} and errors as
# {"error": {"message": ...}}, but not every endpoint does.  These helpers
# give handlers one answer regardless of wrapping:
#
#   is_success(response)             status in [200, 300)
#   extract_payload(response)        body["data"] if present, else the body
#   extract_error_message(response)  always a non-empty message
#   ensure_success(response, action) raise HttpError on anything else
#
# parse_envelope(body, status) does the unwrapping on a bare body so it can
# be tested without an ApiResponse.
# =============================================================================

import json
from typing import Any

from beeboo.errors import HttpError
from beeboo.models import ApiResponse, Envelope


def is_success(response: ApiResponse) -> bool:
    return 200 <= response.status < 300


def _payload_of(body: Any) -> Any:
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _error_message_of(body: Any, status: int) -> str:
    # Fallback order: error.message, then error itself, then a text body,
    # then the status code.
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if error:
            return error if isinstance(error, str) else json.dumps(error, separators=(",", ":"))

    if isinstance(body, str) and body:
        return body

    return f"HTTP {status}"


def parse_envelope(body: Any, status: int) -> Envelope:
    """Split a response body into its payload and a usable error message."""
    return Envelope(payload=_payload_of(body), error_message=_error_message_of(body, status))


def extract_payload(response: ApiResponse) -> Any:
    return parse_envelope(response.data, response.status).payload


def extract_error_message(response: ApiResponse) -> str:
    return parse_envelope(response.data, response.status).error_message


def ensure_success(response: ApiResponse, action: str) -> None:
    """Raise HttpError("<action>: <message>") unless the response is a 2xx."""
    if not is_success(response):
        raise HttpError(response.status, f"{action}: {extract_error_message(response)}")
