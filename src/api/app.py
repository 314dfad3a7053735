"""
FastAPI application: routers, error mapping and request logging.

Run with `game-scores serve` or `uvicorn src.api.app:app`.
"""

import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import games, health, scores, users
from src.core.config import Settings, settings
from src.core.exceptions import ScoresError
from src.core.logger import configure_logging, get_logger

logger = get_logger("api")


def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(title=config.APP_NAME)
    app.state.settings = config

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(games.router)
    app.include_router(scores.router)

    @app.exception_handler(ScoresError)
    async def handle_scores_error(request: Request, exc: ScoresError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            return JSONResponse(
                status_code=exc.status_code, content={"detail": "Internal server error"}
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # anything not mapped by handle_scores_error ends here, logged once
            logger.exception(f"{request.method} {request.url.path} raised")
            response = JSONResponse(
                status_code=500, content={"detail": "Internal server error"}
            )
        duration = time.perf_counter() - start

        # Route template keeps IDs out of the log line; unmatched requests (404) use the raw path
        route = request.scope.get("route")
        path = getattr(route, "path", None) or request.url.path
        logger.info(
            f"request handled method={request.method} path={path} "
            f"status={response.status_code} duration={duration:.4f}s "
            f"user_agent={request.headers.get('user-agent', '')!r}"
        )
        return response

    return app


app = create_app()
