"""Protocol repository (implemented with SQL Alchemy, but anything satisfying these methods will do)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel, PlayerModel, PlayerScore, ScoreModel
from src.core.shared_types import Role


class ScoresRepository(Protocol):
    """Persistence layer orchestration"""

    # --- players ---
    def create_player(
        self, username: str, email: str, password_hash: str, role: Role = Role.PLAYER
    ) -> PlayerModel:
        """Store a new player. Raises DuplicateUserError if username or email is taken."""
        ...

    def find_player_by_username(self, username: str) -> PlayerModel | None:
        """Get player by username, if record exists."""
        ...

    def player_exists(self, player_id: UUID) -> bool:
        ...

    # --- games ---
    def create_game(self, name: str, description: str) -> GameModel:
        """Store a new game. Raises DuplicateGameError if the name is taken."""
        ...

    def find_game_by_id(self, game_id: int) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def game_exists(self, game_id: int) -> bool:
        ...

    def list_games(self) -> list[GameModel]:
        """All games, ordered by ID."""
        ...

    # --- scores ---
    def create_score(self, player_id: UUID, game_id: int) -> ScoreModel:
        """Store a score of 0 for the pair. Raises AlreadyJoinedError if one exists."""
        ...

    def find_score_by_player_and_game(
        self, player_id: UUID, game_id: int
    ) -> ScoreModel | None:
        ...

    def update_score_value(self, score_id: int, value: int) -> ScoreModel | None:
        """Overwrite the value of an existing record (no monotonicity check here)."""
        ...

    def list_scores_by_game(self, game_id: int) -> list[PlayerScore]:
        """Scores of a game with the owner's username, highest first."""
        ...

    # --- maintenance ---
    def delete_all_scores(self) -> int:
        ...

    def delete_all_games(self) -> int:
        ...

    def delete_players_except(self, username: str) -> int:
        ...
