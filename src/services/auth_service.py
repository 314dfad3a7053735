"""Password hashing and access tokens."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

from src.core.config import Settings, settings
from src.core.exceptions import AuthenticationError
from src.core.models import PlayerModel
from src.core.shared_types import Role


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a bearer token."""

    user_id: UUID
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored hash is not a bcrypt hash
        return False


def issue_token(player: PlayerModel, config: Settings = settings) -> str:
    """Signed token valid for JWT_EXPIRE_HOURS."""
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": str(player.id),
        "username": player.username,
        "role": player.role.value,
        "iat": now,
        "exp": now + timedelta(hours=config.JWT_EXPIRE_HOURS),
        "iss": config.JWT_ISSUER,
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_token(token: str, config: Settings = settings) -> TokenClaims:
    """Verify signature, expiry and issuer; raise AuthenticationError on any problem."""
    try:
        payload = jwt.decode(
            token,
            config.JWT_SECRET_KEY,
            algorithms=[config.JWT_ALGORITHM],
            issuer=config.JWT_ISSUER,
            options={"require": ["exp", "iat", "iss"]},
        )
        return TokenClaims(
            user_id=UUID(payload["user_id"]),
            username=payload["username"],
            role=Role(payload["role"]),
        )
    except (jwt.PyJWTError, KeyError, ValueError, TypeError) as exc:
        raise AuthenticationError("Invalid token") from exc
