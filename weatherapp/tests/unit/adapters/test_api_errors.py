import pytest

from weatherapp.adapters.api_errors import (
    build_error_message,
    extract_error_code,
    extract_error_hint,
    parse_error_payload,
)


class _Resp:
    def __init__(self, payload=None, text=""):
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("not json")
        return self._payload


NOT_FOUND = {"error": {"code": 1006, "message": "No matching location found."}}


def test_parse_error_payload_returns_json_body():
    assert parse_error_payload(_Resp(NOT_FOUND)) == NOT_FOUND


def test_parse_error_payload_falls_back_to_trimmed_text():
    assert parse_error_payload(_Resp(text="  Bad Gateway \n")) == "Bad Gateway"
    assert len(parse_error_payload(_Resp(text="x" * 1000))) == 200


def test_parse_error_payload_empty_body_is_none():
    assert parse_error_payload(_Resp(text="")) is None


def test_code_and_hint_come_from_nested_error():
    assert extract_error_code(NOT_FOUND) == "1006"
    assert extract_error_hint(NOT_FOUND) == "No matching location found."


def test_plain_text_body_is_the_hint():
    assert extract_error_code("Bad Gateway") is None
    assert extract_error_hint("Bad Gateway") == "Bad Gateway"


@pytest.mark.parametrize(
    "payload",
    [None, {}, {"error": "down"}, {"message": "top level"}, {"error": {"code": 2006, "message": "  "}}, ["a"]],
)
def test_other_shapes_carry_no_hint(payload):
    assert extract_error_hint(payload) is None


def test_build_error_message_with_and_without_hint():
    assert build_error_message("current", 400, NOT_FOUND) == "current: No matching location found. (HTTP 400)"
    assert build_error_message("current", 503, None) == "current: HTTP 503"
