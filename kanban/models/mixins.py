"""Mixins and column defaults for SQLAlchemy models."""

import secrets
import time

from sqlalchemy import Column, DateTime, func


def generate_id() -> str:
    """Opaque 16-hex-character identifier used as primary key."""
    return secrets.token_hex(8)


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
