"""
Decoding of request bodies and path parameters.

Malformed input is refused here, before any service code runs, with a message telling the client what went wrong.
"""

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.config import settings
from src.core.exceptions import InvalidRequestError, RequestTooLargeError

Model = TypeVar("Model", bound=BaseModel)

_INTEGER_ID = re.compile(r"[+-]?[0-9]+")

# Game IDs are stored as signed 64-bit integers
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def check_body_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise RequestTooLargeError(
            f"Request body must not be larger than {max_bytes} bytes"
        )


def decode_json_body(
    body: bytes, model: type[Model], max_bytes: int = settings.MAX_BODY_BYTES
) -> Model:
    """Parse a single JSON object from the body and validate it against `model`."""
    check_body_size(len(body), max_bytes)

    if not body.strip():
        raise InvalidRequestError("Request body must not be empty")

    data = _load_json(body)
    if not isinstance(data, dict):
        raise InvalidRequestError(
            "Request body contains incorrect JSON type (at character 1)"
        )

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidRequestError(_describe_validation_error(exc)) from exc


def parse_game_id(raw: str) -> int:
    """Game IDs in URLs are base-10 integers."""
    if not _INTEGER_ID.fullmatch(raw):
        raise InvalidRequestError("Invalid game ID format")
    game_id = int(raw)
    if not _MIN_ID <= game_id <= _MAX_ID:
        raise InvalidRequestError("Invalid game ID format")
    return game_id


def _load_json(body: bytes) -> Any:
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        if exc.msg == "Extra data":
            raise InvalidRequestError(
                "Request body must only contain a single JSON object"
            ) from exc
        raise InvalidRequestError(
            f"Request body contains badly-formed JSON (at character {exc.pos})"
        ) from exc
    except ValueError as exc:
        # invalid UTF-8, NaN / Infinity literals
        raise InvalidRequestError("Request body contains badly-formed JSON") from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _describe_validation_error(exc: ValidationError) -> str:
    """Message for the first problem pydantic found."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    if error["type"] == "extra_forbidden":
        return f'Request body contains unknown key "{field}"'
    if field:
        return f'Request body contains incorrect JSON type for field "{field}"'
    return "Request body contains incorrect JSON type"
