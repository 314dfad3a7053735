from fastapi import APIRouter, Depends

from src.api.dependencies import get_service, json_body
from src.api.models import LoginRequest, LoginResponse, MessageResponse, RegisterRequest
from src.services.scores_service import ScoresService

router = APIRouter(tags=["users"])


@router.post("/register", status_code=201, response_model=MessageResponse)
def register(
    payload: RegisterRequest = Depends(json_body(RegisterRequest)),
    service: ScoresService = Depends(get_service),
) -> MessageResponse:
    return service.register(payload)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest = Depends(json_body(LoginRequest)),
    service: ScoresService = Depends(get_service),
) -> LoginResponse:
    return service.login(payload)
