import pytest

from beeboo.envelope import (
    ensure_success,
    extract_error_message,
    extract_payload,
    is_success,
    parse_envelope,
)
from beeboo.errors import HttpError
from beeboo.models import ApiResponse


def response(status, data):
    return ApiResponse(status=status, data=data, raw="")


@pytest.mark.parametrize("status, expected", [
    (199, False),
    (200, True),
    (201, True),
    (299, True),
    (300, False),
    (404, False),
    (500, False),
])
def test_is_success_covers_2xx_only(status, expected):
    assert is_success(response(status, {})) is expected


def test_extract_payload_unwraps_data_key():
    assert extract_payload(response(200, {"data": [1, 2]})) == [1, 2]


def test_extract_payload_keeps_explicit_null_data():
    assert extract_payload(response(200, {"data": None, "meta": {}})) is None


def test_extract_payload_returns_unwrapped_body_unchanged():
    body = {"id": "abc", "title": "t"}
    assert extract_payload(response(200, body)) is body
    assert extract_payload(response(200, [1])) == [1]
    assert extract_payload(response(200, "plain")) == "plain"


def test_error_message_prefers_error_message():
    body = {"error": {"message": "Invalid key", "code": "auth"}}
    assert extract_error_message(response(401, body)) == "Invalid key"


def test_error_message_stringifies_error_object_without_message():
    body = {"error": {"code": "rate_limited"}}
    assert extract_error_message(response(429, body)) == '{"code":"rate_limited"}'


def test_error_message_uses_error_string():
    assert extract_error_message(response(400, {"error": "bad input"})) == "bad input"


def test_error_message_falls_back_to_text_body():
    assert extract_error_message(response(502, "Bad Gateway")) == "Bad Gateway"


@pytest.mark.parametrize("body", [None, {}, [], "", {"error": None}, {"error": ""}])
def test_error_message_falls_back_to_status(body):
    assert extract_error_message(response(503, body)) == "HTTP 503"


def test_parse_envelope_splits_payload_and_error():
    envelope = parse_envelope({"data": {"id": 1}}, 200)
    assert envelope.payload == {"id": 1}
    assert envelope.error_message == "HTTP 200"

    failed = parse_envelope({"error": {"message": "nope"}}, 400)
    assert failed.payload == {"error": {"message": "nope"}}
    assert failed.error_message == "nope"


def test_ensure_success_raises_with_action_prefix():
    with pytest.raises(HttpError) as excinfo:
        ensure_success(response(500, {"error": {"message": "boom"}}), "Search failed")
    assert excinfo.value.status == 500
    assert str(excinfo.value) == "Search failed: boom"


def test_ensure_success_passes_2xx():
    ensure_success(response(204, ""), "Search failed")
