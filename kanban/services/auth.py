"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kanban.errors import AuthenticationError, ConflictError, ValidationError
from kanban.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class AuthService:
    """Issues and validates access tokens with an explicitly supplied secret."""

    def __init__(
        self,
        jwt_secret: str,
        jwt_algorithm: str = "HS256",
        jwt_expiration_minutes: int = 10080,
    ) -> None:
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm
        self.jwt_expiration_minutes = jwt_expiration_minutes

    def create_access_token(self, user_id: str, email: str) -> str:
        """Create a JWT access token."""
        expire = datetime.now(UTC) + timedelta(minutes=self.jwt_expiration_minutes)
        to_encode = {
            "sub": user_id,
            "email": email,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.jwt_secret, algorithm=self.jwt_algorithm)

    def decode_access_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token.

        Raises AuthenticationError with "Token expired" or "Invalid token".
        """
        try:
            return jwt.decode(token, self.jwt_secret, algorithms=[self.jwt_algorithm])
        except ExpiredSignatureError as e:
            raise AuthenticationError("Token expired") from e
        except JWTError as e:
            raise AuthenticationError("Invalid token") from e


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == email.lower()).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user.

    Raises ConflictError when the email is already taken, including when a
    concurrent registration wins the race to the unique index.
    """
    hashed_password = get_password_hash(password)
    user = User(email=email.lower(), password_hash=hashed_password, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email already registered") from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def update_profile(db: Session, user: User, updates: dict[str, Any]) -> User:
    """Apply a profile update: a non-empty name, and/or an avatar URL (None clears it)."""
    changed = False
    if updates.get("name"):
        user.name = updates["name"]
        changed = True
    if "avatar_url" in updates:
        user.avatar_url = updates["avatar_url"]
        changed = True

    if not changed:
        raise ValidationError("No fields to update")

    db.commit()
    db.refresh(user)
    return user


def change_password(db: Session, user: User, current_password: str, new_password: str) -> None:
    """Replace the user's password after checking the current one."""
    if not verify_password(current_password, user.password_hash):
        raise AuthenticationError("Current password is incorrect")

    user.password_hash = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password changed for user {user.id}")
