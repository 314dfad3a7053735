"""
FastAPI dependencies shared by the routers.

Order matters: routes list them as authentication -> path parameters -> body,
which is the order in which a bad request gets rejected.
"""

from typing import Any, Callable, Coroutine

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.api.decoder import Model, check_body_size, decode_json_body, parse_game_id
from src.core.config import Settings
from src.core.exceptions import AuthenticationError, ForbiddenError
from src.db.database import get_db
from src.db.sql_repository import SQLScoresRepository
from src.services.auth_service import TokenClaims, decode_token
from src.services.scores_service import ScoresService

# auto_error disabled so missing and invalid tokens get our own 401 messages
bearer = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_service(
    db: Session = Depends(get_db), config: Settings = Depends(get_settings)
) -> ScoresService:
    """One service (and one database session) per request."""
    return ScoresService(SQLScoresRepository(db), config)


def current_player(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    config: Settings = Depends(get_settings),
) -> TokenClaims:
    if not request.headers.get("Authorization"):
        raise AuthenticationError("Authorization header required")
    if credentials is None:
        raise AuthenticationError("Invalid token")
    return decode_token(credentials.credentials, config)


def require_admin(claims: TokenClaims = Depends(current_player)) -> TokenClaims:
    if not claims.is_admin:
        raise ForbiddenError("Forbidden: This action requires admin privileges")
    return claims


def game_id_path(gameID: str) -> int:
    return parse_game_id(gameID)


async def read_body(request: Request, max_bytes: int) -> bytes:
    """Read the body, giving up as soon as it grows past `max_bytes`."""
    declared = request.headers.get("content-length", "")
    if declared.isascii() and declared.isdigit():
        check_body_size(int(declared), max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        check_body_size(len(body), max_bytes)
    return bytes(body)


def json_body(
    model: type[Model],
) -> Callable[[Request, Settings], Coroutine[Any, Any, Model]]:
    """Dependency decoding the request body into `model` (see src/api/decoder.py)."""

    async def dependency(
        request: Request, config: Settings = Depends(get_settings)
    ) -> Model:
        body = await read_body(request, config.MAX_BODY_BYTES)
        return decode_json_body(body, model, config.MAX_BODY_BYTES)

    return dependency
