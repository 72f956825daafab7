"""Application error types mapped to HTTP statuses by the central error handler."""

from fastapi import status


class KanbanError(Exception):
    """Base error carrying a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(KanbanError):
    """Missing or invalid field."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(KanbanError):
    """Missing/invalid/expired token or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(KanbanError):
    """Resource absent or not owned by the caller; the two are never told apart."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(KanbanError):
    """Unique constraint clash, e.g. an already-registered email."""

    status_code = status.HTTP_409_CONFLICT
