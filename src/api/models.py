"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.exceptions import InvalidRequestError

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 64
MIN_PASSWORD_LENGTH = 8


class RequestBody(BaseModel):
    """
    JSON body sent by a client.
    ----
    Types are not coerced ("5" is not an int, 5 is not a str), unknown keys are refused,
    and missing keys fall back to their (empty) default before field validation runs.
    """

    model_config = ConfigDict(extra="forbid", strict=True, validate_default=True)


# --- REQUEST MODELS ---
class RegisterRequest(RequestBody):
    username: str = ""
    email: str = ""
    password: str = ""

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if len(value) < MIN_USERNAME_LENGTH:
            raise InvalidRequestError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
            )
        if len(value) > MAX_USERNAME_LENGTH:
            raise InvalidRequestError(
                f"Username must not exceed {MAX_USERNAME_LENGTH} characters"
            )
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not value:
            raise InvalidRequestError("Email cannot be empty")
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise InvalidRequestError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return value


class LoginRequest(RequestBody):
    username: str = ""
    password: str = ""


class CreateGameRequest(RequestBody):
    game_name: str = ""
    description: str = ""

    @field_validator("game_name")
    @classmethod
    def validate_game_name(cls, value: str) -> str:
        if value == "":
            raise InvalidRequestError("Game name cannot be empty")
        return value


class ScoreUpdateBody(RequestBody):
    # Kept as text: parsed only once the player's record is known to exist
    score: str = ""


class JoinGameRequest(BaseModel):
    game_id: int
    player_id: UUID


class UpdateScoreRequest(BaseModel):
    game_id: int
    player_id: UUID
    score: str


class GameScoresRequest(BaseModel):
    game_id: int


# --- RESPONSE MODELS ---
class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str


class GameResponse(BaseModel):
    id: int
    name: str
    description: str


class JoinGameResponse(BaseModel):
    message: str
    score: int


class ScoreUpdateResponse(BaseModel):
    score: str


class GameScoreResponse(BaseModel):
    username: str
    score: str


class GameStatisticsResponse(BaseModel):
    mean: str
    median: str
    mode: list[str]
