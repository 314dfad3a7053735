"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and db layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer or API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.core.shared_types import Role


@dataclass
class PlayerModel:
    """Registered account. The password hash never leaves the service layer."""

    id: UUID
    username: str
    email: str
    password_hash: str = field(repr=False)
    role: Role = Role.PLAYER


@dataclass
class GameModel:
    id: int
    name: str
    description: str = ""


@dataclass
class ScoreModel:
    """Current score of one player in one game."""

    id: int
    player_id: UUID
    game_id: int
    value: int
    created_at: datetime


@dataclass
class PlayerScore:
    """A score paired with the display name of the player that owns it."""

    username: str
    value: int
