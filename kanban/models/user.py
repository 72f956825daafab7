"""User model."""

from sqlalchemy import Column, String

from kanban.database import Base
from kanban.models.mixins import TimestampMixin, generate_id


class User(Base, TimestampMixin):
    """User model for authentication and board ownership."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    avatar_url = Column(String, nullable=True)
