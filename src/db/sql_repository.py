"""Implementation of (Scores)Repository using SQLAlchemy"""

from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.core.exceptions import (
    AlreadyJoinedError,
    DuplicateGameError,
    DuplicateUserError,
    RepositoryError,
)
from src.core.logger import get_logger
from src.core.models import GameModel, PlayerModel, PlayerScore, ScoreModel
from src.core.shared_types import Role
from src.db.schema import DBGame, DBPlayer, DBScore

logger = get_logger("db")


class SQLScoresRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    # --- players ---
    def create_player(
        self, username: str, email: str, password_hash: str, role: Role = Role.PLAYER
    ) -> PlayerModel:
        player_db = DBPlayer(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role.value,
        )
        self._insert(player_db, DuplicateUserError("User already exists"))
        return self._player_to_model(player_db)

    def find_player_by_username(self, username: str) -> PlayerModel | None:
        query = select(DBPlayer).where(DBPlayer.username == username)
        player_db = self.db.scalar(query)
        if player_db:
            return self._player_to_model(player_db)
        return None

    def player_exists(self, player_id: UUID) -> bool:
        query = select(exists().where(DBPlayer.id == player_id))
        return bool(self.db.scalar(query))

    # --- games ---
    def create_game(self, name: str, description: str) -> GameModel:
        game_db = DBGame(name=name, description=description)
        self._insert(game_db, DuplicateGameError("Game with this name already exists"))
        return self._game_to_model(game_db)

    def find_game_by_id(self, game_id: int) -> GameModel | None:
        game_db = self.db.get(DBGame, game_id)
        if game_db:
            return self._game_to_model(game_db)
        return None

    def game_exists(self, game_id: int) -> bool:
        query = select(exists().where(DBGame.id == game_id))
        return bool(self.db.scalar(query))

    def list_games(self) -> list[GameModel]:
        query = select(DBGame).order_by(DBGame.id)
        return [self._game_to_model(game_db) for game_db in self.db.scalars(query)]

    # --- scores ---
    def create_score(self, player_id: UUID, game_id: int) -> ScoreModel:
        score_db = DBScore(player_id=player_id, game_id=game_id, value=0)
        self._insert(score_db, AlreadyJoinedError("User has already joined this game"))
        return self._score_to_model(score_db)

    def find_score_by_player_and_game(
        self, player_id: UUID, game_id: int
    ) -> ScoreModel | None:
        score_db = self._fetch_score(player_id, game_id)
        if score_db:
            return self._score_to_model(score_db)
        return None

    def update_score_value(self, score_id: int, value: int) -> ScoreModel | None:
        score_db = self.db.get(DBScore, score_id)
        if not score_db:
            return None
        score_db.value = value
        self.db.commit()
        self.db.refresh(score_db)
        return self._score_to_model(score_db)

    def list_scores_by_game(self, game_id: int) -> list[PlayerScore]:
        query = (
            select(DBPlayer.username, DBScore.value)
            .select_from(DBScore)
            .join(DBPlayer, DBScore.player_id == DBPlayer.id)
            .where(DBScore.game_id == game_id)
            .order_by(DBScore.value.desc(), DBScore.id)
        )
        return [
            PlayerScore(username=username, value=value)
            for username, value in self.db.execute(query)
        ]

    # --- maintenance ---
    def delete_all_scores(self) -> int:
        return self._delete(delete(DBScore))

    def delete_all_games(self) -> int:
        return self._delete(delete(DBGame))

    def delete_players_except(self, username: str) -> int:
        return self._delete(delete(DBPlayer).where(DBPlayer.username != username))

    # --- internal helpers ---
    def _insert(self, record: DBPlayer | DBGame | DBScore, conflict: Exception) -> None:
        """Add + commit, turning unique constraint violations into the given conflict."""
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not _is_unique_violation(exc):
                logger.error(f"Insert into {record.__tablename__} failed: {exc.orig}")
                message = f"Could not store {record.__tablename__} record"
                raise RepositoryError(message) from exc
            logger.info(f"Rejected insert into {record.__tablename__}: {exc.orig}")
            raise conflict from exc
        self.db.refresh(record)

    def _delete(self, statement) -> int:
        result = self.db.execute(statement)
        self.db.commit()
        return result.rowcount

    def _fetch_score(self, player_id: UUID, game_id: int) -> DBScore | None:
        query = select(DBScore).where(
            DBScore.player_id == player_id, DBScore.game_id == game_id
        )
        return self.db.scalar(query)

    def _player_to_model(self, player_db: DBPlayer) -> PlayerModel:
        """Convert SQLAlchemy model to data transfer model."""
        return PlayerModel(
            id=player_db.id,
            username=player_db.username,
            email=player_db.email,
            password_hash=player_db.password_hash,
            role=Role(player_db.role),
        )

    def _game_to_model(self, game_db: DBGame) -> GameModel:
        return GameModel(
            id=game_db.id, name=game_db.name, description=game_db.description or ""
        )

    def _score_to_model(self, score_db: DBScore) -> ScoreModel:
        return ScoreModel(
            id=score_db.id,
            player_id=score_db.player_id,
            game_id=score_db.game_id,
            value=score_db.value,
            created_at=score_db.created_at,
        )


def _is_unique_violation(exc: IntegrityError) -> bool:
    """PostgreSQL drivers report SQLSTATE 23505; SQLite only says so in the message."""
    sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == "23505"
    return "unique" in str(exc.orig).lower()
