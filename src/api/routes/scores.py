"""Per-game score routes: joining, submitting, leaderboard and statistics."""

from fastapi import APIRouter, Depends

from src.api.dependencies import current_player, game_id_path, get_service, json_body
from src.api.models import (
    GameScoreResponse,
    GameScoresRequest,
    GameStatisticsResponse,
    JoinGameRequest,
    JoinGameResponse,
    ScoreUpdateBody,
    ScoreUpdateResponse,
    UpdateScoreRequest,
)
from src.services.auth_service import TokenClaims
from src.services.scores_service import ScoresService

router = APIRouter(prefix="/games/{gameID}", tags=["scores"])


@router.post("/join", status_code=201, response_model=JoinGameResponse)
def join_game(
    claims: TokenClaims = Depends(current_player),
    game_id: int = Depends(game_id_path),
    service: ScoresService = Depends(get_service),
) -> JoinGameResponse:
    return service.join_game(JoinGameRequest(game_id=game_id, player_id=claims.user_id))


@router.put("/scores", response_model=ScoreUpdateResponse)
def update_score(
    claims: TokenClaims = Depends(current_player),
    game_id: int = Depends(game_id_path),
    payload: ScoreUpdateBody = Depends(json_body(ScoreUpdateBody)),
    service: ScoresService = Depends(get_service),
) -> ScoreUpdateResponse:
    request = UpdateScoreRequest(
        game_id=game_id, player_id=claims.user_id, score=payload.score
    )
    return service.update_score(request)


@router.get("/scores", response_model=list[GameScoreResponse])
def list_scores(
    game_id: int = Depends(game_id_path),
    service: ScoresService = Depends(get_service),
) -> list[GameScoreResponse]:
    return service.list_scores(GameScoresRequest(game_id=game_id))


@router.get("/statistics", response_model=GameStatisticsResponse)
def score_statistics(
    game_id: int = Depends(game_id_path),
    service: ScoresService = Depends(get_service),
) -> GameStatisticsResponse:
    return service.score_statistics(GameScoresRequest(game_id=game_id))
