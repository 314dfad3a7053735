"""Unit tests for src/api/decoder.py"""

import pytest

from src.api.decoder import decode_json_body, parse_game_id
from src.api.models import CreateGameRequest, ScoreUpdateBody
from src.core.exceptions import InvalidRequestError, RequestTooLargeError


def test_decodes_valid_body() -> None:
    body = decode_json_body(b'{"score": "42"}', ScoreUpdateBody)
    assert body.score == "42"


@pytest.mark.parametrize(
    "raw, message",
    [
        (b"", "Request body must not be empty"),
        (b"   \n", "Request body must not be empty"),
        (b'{"score": "42"', "badly-formed JSON"),
        (b"{'score': '42'}", "badly-formed JSON"),
        (b'{"score": NaN}', "badly-formed JSON"),
        (b'{"score": "1"}{"score": "2"}', "must only contain a single JSON object"),
        (b'["score"]', "incorrect JSON type (at character 1)"),
        (b'{"score": 42}', 'incorrect JSON type for field "score"'),
        (b'{"score": "42", "cheat": true}', 'unknown key "cheat"'),
    ],
)
def test_malformed_bodies(raw: bytes, message: str) -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        decode_json_body(raw, ScoreUpdateBody)
    assert message in exc_info.value.message


def test_syntax_error_reports_position() -> None:
    with pytest.raises(InvalidRequestError, match=r"at character 10\)"):
        decode_json_body(b'{"score": }', ScoreUpdateBody)


def test_body_too_large() -> None:
    with pytest.raises(RequestTooLargeError):
        decode_json_body(b'{"score": "' + b"1" * 100 + b'"}', ScoreUpdateBody, max_bytes=64)


def test_field_validation_runs_after_decoding() -> None:
    with pytest.raises(InvalidRequestError, match="Game name cannot be empty"):
        decode_json_body(b'{"description": "nameless"}', CreateGameRequest)


# -- Path parameters --
@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("42", 42), ("+7", 7), ("9223372036854775807", 2**63 - 1)],
)
def test_valid_game_id(raw: str, expected: int) -> None:
    assert parse_game_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "1.5", "", "12a", "٣", "99999999999999999999", "-9223372036854775809"],
)
def test_invalid_game_id(raw: str) -> None:
    with pytest.raises(InvalidRequestError, match="Invalid game ID format"):
        parse_game_id(raw)
