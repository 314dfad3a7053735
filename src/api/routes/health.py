import time

from fastapi import APIRouter, Depends

from src.api.dependencies import get_settings
from src.core.config import Settings

router = APIRouter(tags=["health"])

# Track application start time
start_time = time.time()


@router.get("/")
def root(config: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"message": f"{config.APP_NAME} is running"}


@router.get("/health")
def health() -> dict[str, str | float]:
    return {"status": "healthy", "uptime": time.time() - start_time}
