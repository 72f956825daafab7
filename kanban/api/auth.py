"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.api.dependencies import get_auth_service, get_current_user
from kanban.database import get_db
from kanban.errors import AuthenticationError, ConflictError
from kanban.models.user import User
from kanban.schemas.auth import (
    AuthResponse,
    MessageResponse,
    PasswordChange,
    ProfileUpdate,
    UserLogin,
    UserRegister,
    UserResponse,
)
from kanban.services.auth import (
    AuthService,
    authenticate_user,
    change_password as change_user_password,
    create_user,
    get_user_by_email,
    update_profile as update_user_profile,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    if get_user_by_email(db, user_data.email):
        raise ConflictError("Email already registered")

    user = create_user(db, user_data.email, user_data.password, user_data.name)
    token = auth_service.create_access_token(user.id, user.email)

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise AuthenticationError("Invalid email or password")

    token = auth_service.create_access_token(user.id, user.email)

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.patch("/profile", response_model=UserResponse)
def update_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update name and/or avatar."""
    return update_user_profile(db, current_user, profile_data.model_dump(exclude_unset=True))


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    password_data: PasswordChange,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Change the current user's password."""
    change_user_password(
        db, current_user, password_data.current_password, password_data.new_password
    )
    return MessageResponse(message="Password updated successfully")
