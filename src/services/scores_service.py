"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    GameScoreResponse,
    GameScoresRequest,
    GameStatisticsResponse,
    JoinGameRequest,
    JoinGameResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    ScoreUpdateResponse,
    UpdateScoreRequest,
)
from src.core.config import Settings, settings
from src.core.exceptions import (
    AlreadyJoinedError,
    AuthenticationError,
    GameNotFoundError,
    RepositoryError,
    ScoreNotFoundError,
)
from src.core.logger import get_logger
from src.core.models import ScoreModel
from src.core.shared_types import Role
from src.db.repository import ScoresRepository
from src.scores.encoding import encode_score
from src.scores.leaderboard import build_leaderboard
from src.scores.statistics import compute_statistics
from src.scores.validation import parse_score, validate_update
from src.services.auth_service import hash_password, issue_token, verify_password

logger = get_logger("service")


class ScoresService:
    """Orchestration of layers for players, games and their scores."""

    def __init__(self, repository: ScoresRepository, config: Settings = settings) -> None:
        self.repo = repository
        self.config = config

    # -- Accounts --
    def register(self, request: RegisterRequest, role: Role = Role.PLAYER) -> MessageResponse:
        """Create a player account with a hashed password."""
        player = self.repo.create_player(
            username=request.username,
            email=request.email,
            password_hash=hash_password(request.password),
            role=role,
        )
        logger.info(f"User registered successfully: {player.username}")
        return MessageResponse(message="User registered successfully")

    def login(self, request: LoginRequest) -> LoginResponse:
        """Exchange credentials for a bearer token."""
        player = self.repo.find_player_by_username(request.username)

        # Same answer for unknown user and wrong password
        if player is None or not verify_password(request.password, player.password_hash):
            raise AuthenticationError("Invalid username or password")

        return LoginResponse(token=issue_token(player, self.config))

    # -- Games --
    def list_games(self) -> list[GameResponse]:
        return [
            GameResponse(id=game.id, name=game.name, description=game.description)
            for game in self.repo.list_games()
        ]

    def create_game(self, request: CreateGameRequest) -> MessageResponse:
        """Admin registered a new game (role is checked by the caller)."""
        game = self.repo.create_game(request.game_name, request.description)
        logger.info(f"Game added successfully: {game.name}, ID: {game.id}")
        return MessageResponse(message="Game added successfully")

    # -- Scores --
    def join_game(self, request: JoinGameRequest) -> JoinGameResponse:
        """Open a score of 0 for the player in the game."""
        self._ensure_game(request.game_id)
        # a token can outlive its account (see `game-scores reset`)
        if not self.repo.player_exists(request.player_id):
            raise AuthenticationError("Invalid token")

        existing = self.repo.find_score_by_player_and_game(request.player_id, request.game_id)
        if existing is not None:
            raise AlreadyJoinedError("User has already joined this game")

        # The store's unique constraint still guards against a concurrent join
        score = self.repo.create_score(request.player_id, request.game_id)
        logger.info(f"Player {request.player_id} joined game {request.game_id}")
        return JoinGameResponse(message="Successfully joined game", score=score.value)

    def update_score(self, request: UpdateScoreRequest) -> ScoreUpdateResponse:
        """
        Replace the player's score if the new one is not lower.
        ----
        Read and write are two separate statements: two concurrent updates of the same record
        can interleave around the comparison and the last write wins.
        """
        current = self._fetch_score(request.player_id, request.game_id)
        proposed = parse_score(request.score)
        value = validate_update(current.value, proposed)

        updated = self.repo.update_score_value(current.id, value)
        if updated is None:
            raise RepositoryError(f"Score {current.id} vanished during update.")

        logger.info(
            f"Score updated: player={request.player_id} game={request.game_id} "
            f"{current.value} -> {updated.value}"
        )
        return ScoreUpdateResponse(score=encode_score(updated.value))

    def list_scores(self, request: GameScoresRequest) -> list[GameScoreResponse]:
        """Leaderboard of a game, highest score first."""
        self._ensure_game(request.game_id)
        records = self.repo.list_scores_by_game(request.game_id)
        return [
            GameScoreResponse(username=entry.username, score=entry.score)
            for entry in build_leaderboard(records)
        ]

    def score_statistics(self, request: GameScoresRequest) -> GameStatisticsResponse:
        """Mean, median and mode of all scores in a game."""
        self._ensure_game(request.game_id)
        records = self.repo.list_scores_by_game(request.game_id)
        stats = compute_statistics(record.value for record in records)
        return GameStatisticsResponse(
            mean=encode_score(stats.mean),
            median=encode_score(stats.median),
            mode=[encode_score(value) for value in stats.mode],
        )

    # -- Internal helpers --
    def _ensure_game(self, game_id: int) -> None:
        if not self.repo.game_exists(game_id):
            raise GameNotFoundError("Game not found")

    def _fetch_score(self, player_id: UUID, game_id: int) -> ScoreModel:
        """Attempt to find the player's score in the game and raise error if it fails."""
        score = self.repo.find_score_by_player_and_game(player_id, game_id)
        if score is None:
            raise ScoreNotFoundError("Score not found, player must join the game first.")
        return score
