from fastapi import APIRouter, Depends

from src.api.dependencies import get_service, json_body, require_admin
from src.api.models import CreateGameRequest, GameResponse, MessageResponse
from src.services.auth_service import TokenClaims
from src.services.scores_service import ScoresService

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[GameResponse])
def list_games(service: ScoresService = Depends(get_service)) -> list[GameResponse]:
    return service.list_games()


@router.post("", status_code=201, response_model=MessageResponse)
def create_game(
    _: TokenClaims = Depends(require_admin),
    payload: CreateGameRequest = Depends(json_body(CreateGameRequest)),
    service: ScoresService = Depends(get_service),
) -> MessageResponse:
    """Admin only."""
    return service.create_game(payload)
