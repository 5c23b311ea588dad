import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from beeboo.api import BeeBooApi  # noqa: E402
from beeboo.models import ApiResponse  # noqa: E402


@dataclass
class RecordedCall:
    method: str
    path: str
    body: Any
    query: Optional[Dict[str, Any]]


class FakeRequest:
    """
    Stand-in for beeboo.api.request.

    Records every call and replays queued responses in order.  The last
    queued response is reused once the queue is down to one, so repeated
    calls against an "unchanged backend" see the same answer.
    """

    def __init__(self):
        self.calls: List[RecordedCall] = []
        self._responses: List[ApiResponse] = []

    def respond(self, data: Any = None, status: int = 200, raw: Optional[str] = None) -> "FakeRequest":
        if raw is None:
            raw = data if isinstance(data, str) else json.dumps(data)
        self._responses.append(ApiResponse(status=status, data=data, raw=raw))
        return self

    def __call__(self, method, path, body=None, query=None) -> ApiResponse:
        self.calls.append(RecordedCall(method, path, body, query))
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def last_call(self) -> RecordedCall:
        assert self.calls, "no request was made"
        return self.calls[-1]


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    """
    Every test runs with an API key and the default endpoint.
    """
    monkeypatch.setenv("BEEBOO_API_KEY", "bb_sk_test")
    monkeypatch.delenv("BEEBOO_API_URL", raising=False)
    yield


@pytest.fixture
def fake_request() -> FakeRequest:
    return FakeRequest()


@pytest.fixture
def api(fake_request) -> BeeBooApi:
    return BeeBooApi(fake_request)
