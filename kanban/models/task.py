"""Task model."""

from datetime import UTC, datetime

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, String, Text, func
from sqlalchemy.orm import relationship

from kanban.database import Base
from kanban.models.enums import Priority
from kanban.models.mixins import generate_id


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Task(Base):
    """A task card; the column it sits in is its workflow state."""

    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True, default=generate_id)
    column_id = Column(
        String(32), ForeignKey("columns.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(
        Enum(
            Priority,
            name="taskpriority",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
        default=Priority.MEDIUM,
    )
    due_date = Column(Date, nullable=True, index=True)
    created_at = Column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    column = relationship("BoardColumn", back_populates="tasks")
