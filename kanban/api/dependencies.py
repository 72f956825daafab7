"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from kanban.config import get_settings
from kanban.database import get_db
from kanban.errors import AuthenticationError
from kanban.models.user import User
from kanban.services.auth import AuthService

security = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    """Get an auth service configured from settings."""
    settings = get_settings()
    return AuthService(
        jwt_secret=settings.jwt_secret,
        jwt_algorithm=settings.jwt_algorithm,
        jwt_expiration_minutes=settings.jwt_expiration_minutes,
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise AuthenticationError("No token provided")

    payload = auth_service.decode_access_token(credentials.credentials)

    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationError("Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise AuthenticationError("User not found")

    return user
