"""
Exceptions raised by the service, domain and persistence layers.

Every exception carries the HTTP status the API layer answers with, so routers never need to translate them one by one.
"""


class ScoresError(Exception):
    """Top-level exception for the application."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# --- 400 / 406 / 413 ---
class InvalidRequestError(ScoresError):
    status_code = 400


class InvalidScoreError(InvalidRequestError):
    pass


class ScoreRegressionError(ScoresError):
    """A new score lower than the stored one."""

    status_code = 406


class RequestTooLargeError(ScoresError):
    status_code = 413


# --- 401 / 403 ---
class AuthenticationError(ScoresError):
    status_code = 401


class ForbiddenError(ScoresError):
    status_code = 403


# --- 404 ---
class NotFoundError(ScoresError):
    status_code = 404


class GameNotFoundError(NotFoundError):
    pass


class ScoreNotFoundError(NotFoundError):
    pass


# --- 409 ---
class ConflictError(ScoresError):
    status_code = 409


class AlreadyJoinedError(ConflictError):
    pass


class DuplicateGameError(ConflictError):
    pass


class DuplicateUserError(ConflictError):
    pass


# --- 500 ---
class RepositoryError(ScoresError):
    """Persistence layer failed in a way the request cannot recover from."""

    status_code = 500
