# =============================================================================
# beeboo/api.py  —  HTTP Transport & BeeBoo Endpoint Helpers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   request() performs exactly one HTTP call against the BeeBoo API and
#   returns an ApiResponse.  BeeBooApi maps each BeeBoo operation (search,
#   list approvals, ...) onto a method + path + body.
#
# CONTRACT OF request():
#   - Non-2xx answers are RETURNED (status + parsed body), not raised.  The
#     handlers decide what a 404 means for their tool.
#   - Connection failures raise NetworkError; the 30s timeout raises
#     RequestTimeoutError.
#   - A missing API key raises ConfigError before any socket is opened.
#   - Bodies that are not JSON come back as the raw string.
#
# A fresh connection is opened per call (urllib.request); nothing is pooled.
# =============================================================================

import http.client
import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Mapping, Optional

from beeboo.config import REQUEST_TIMEOUT_SECONDS, USER_AGENT, get_config
from beeboo.errors import NetworkError, RequestTimeoutError
from beeboo.models import ApiResponse

logger = logging.getLogger(__name__)

RequestFn = Callable[..., ApiResponse]


def build_query_string(query: Optional[Mapping[str, Any]]) -> str:
    """Encode query parameters, dropping None and empty-string values."""
    if not query:
        return ""

    params = []
    for key, value in query.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        params.append((key, str(value)))
    return urllib.parse.urlencode(params)


def _parse_body(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def request(
    method: str,
    path: str,
    body: Any = None,
    query: Optional[Mapping[str, Any]] = None,
) -> ApiResponse:
    """Make one request to the BeeBoo API.

    Args:
        method: HTTP method ("GET", "POST", ...).
        path: API path, e.g. "/api/v1/knowledge/entries".
        body: JSON-serializable payload.  None sends no body at all.
        query: Query parameters.  None and "" values are omitted.

    Returns:
        ApiResponse with the status code, parsed body and raw text.

    Raises:
        ConfigError: BEEBOO_API_KEY is not configured.
        NetworkError: the connection failed.
        RequestTimeoutError: no answer within REQUEST_TIMEOUT_SECONDS.
    """
    config = get_config()

    url = config.api_url + path
    query_string = build_query_string(query)
    if query_string:
        url += "?" + query_string

    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
        "X-API-Key": config.api_key,
        "Authorization": f"Bearer {config.api_key}",
    }

    payload = None
    if body is not None:
        payload = json.dumps(body).encode("utf-8")

    req = urllib.request.Request(url, data=payload, headers=headers, method=method.upper())
    logger.debug("%s %s", req.get_method(), url)

    try:
        with urllib.request.urlopen(req, timeout=REQUEST_TIMEOUT_SECONDS) as response:
            status = response.status
            raw_bytes = response.read()
    except urllib.error.HTTPError as exc:
        # urllib raises on 4xx/5xx; the body still carries the API's error.
        status = exc.code
        try:
            raw_bytes = exc.read()
        finally:
            exc.close()
    except urllib.error.URLError as exc:
        if isinstance(exc.reason, (socket.timeout, TimeoutError)):
            raise RequestTimeoutError(f"Request timed out ({REQUEST_TIMEOUT_SECONDS}s)") from exc
        raise NetworkError(f"Network error: {exc.reason}") from exc
    except TimeoutError as exc:
        raise RequestTimeoutError(f"Request timed out ({REQUEST_TIMEOUT_SECONDS}s)") from exc
    except (OSError, http.client.HTTPException) as exc:
        raise NetworkError(f"Network error: {exc}") from exc

    raw = raw_bytes.decode("utf-8", errors="replace") if raw_bytes else ""
    return ApiResponse(status=status, data=_parse_body(raw), raw=raw)


class BeeBooApi:
    """The BeeBoo endpoints the tools use.

    ``request_fn`` defaults to :func:`request`; tests pass a fake with the
    same signature.
    """

    def __init__(self, request_fn: Optional[RequestFn] = None):
        self._request = request_fn or request

    def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self._request("GET", path, None, query)

    def post(self, path: str, body: Any, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self._request("POST", path, body, query)

    # ── Knowledge ─────────────────────────────────────────────────────────

    def search_knowledge(self, query: str, limit: int = 10) -> ApiResponse:
        return self.post("/api/v1/knowledge/search", {"query": query, "limit": limit})

    def list_knowledge_entries(self, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.get("/api/v1/knowledge/entries", query)

    def create_knowledge_entry(self, entry: Mapping[str, Any]) -> ApiResponse:
        return self.post("/api/v1/knowledge/entries", dict(entry))

    # ── Approvals ─────────────────────────────────────────────────────────

    def submit_approval(self, approval: Mapping[str, Any]) -> ApiResponse:
        return self.post("/api/v1/approvals", dict(approval))

    def list_approvals(self, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.get("/api/v1/approvals", query)

    def get_approval(self, approval_id: str) -> ApiResponse:
        return self.get(f"/api/v1/approvals/{_path_segment(approval_id)}")

    # ── Work requests ─────────────────────────────────────────────────────

    def create_request(self, work_request: Mapping[str, Any]) -> ApiResponse:
        return self.post("/api/v1/requests", dict(work_request))

    def list_requests(self, query: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.get("/api/v1/requests", query)


def _path_segment(value: str) -> str:
    return urllib.parse.quote(str(value), safe="")
