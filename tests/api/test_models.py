import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, RegisterRequest, ScoreUpdateBody
from src.core.exceptions import InvalidRequestError


# -- Validation - RegisterRequest --
def test_valid_registration() -> None:
    request = RegisterRequest(
        username="mocker", email="mocker@example.com", password="12345678"
    )
    assert request.username == "mocker"


@pytest.mark.parametrize(
    "username",
    [
        "",
        "ab",  # one short of the minimum
        "x" * 65,  # one above the maximum
    ],
)
def test_invalid_username_length(username: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = RegisterRequest(
            username=username, email="mocker@example.com", password="12345678"
        )


@pytest.mark.parametrize("username", ["abc", "x" * 64])
def test_username_length_bounds(username: str) -> None:
    request = RegisterRequest(
        username=username, email="mocker@example.com", password="12345678"
    )
    assert request.username == username


def test_short_password() -> None:
    with pytest.raises(InvalidRequestError, match="at least 8 characters"):
        _ = RegisterRequest(username="mocker", email="m@example.com", password="1234567")


def test_missing_email() -> None:
    """Missing keys fall back to empty strings, which field validation then refuses."""
    with pytest.raises(InvalidRequestError, match="Email cannot be empty"):
        _ = RegisterRequest(username="mocker", password="12345678")


# -- Validation - CreateGameRequest --
def test_game_name_required() -> None:
    with pytest.raises(InvalidRequestError, match="Game name cannot be empty"):
        _ = CreateGameRequest(description="no name")


def test_description_optional() -> None:
    assert CreateGameRequest(game_name="Pong").description == ""


# -- Strict JSON types --
def test_score_must_be_a_string() -> None:
    """Scores travel as decimal strings; a JSON number is a type mismatch."""
    with pytest.raises(ValidationError):
        _ = ScoreUpdateBody.model_validate({"score": 10})


def test_unknown_field_refused() -> None:
    with pytest.raises(ValidationError):
        _ = ScoreUpdateBody.model_validate({"score": "10", "bonus": "5"})
