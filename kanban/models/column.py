"""Board column model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from kanban.database import Base
from kanban.models.mixins import generate_id


class BoardColumn(Base):
    """A column of a board; its order sets the left-to-right position."""

    __tablename__ = "columns"

    id = Column(String(32), primary_key=True, default=generate_id)
    board_id = Column(
        String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    # "order" is a reserved word; SQLAlchemy quotes it in emitted SQL
    order = Column("order", Integer, nullable=False, default=0)

    # Relationships
    board = relationship("Board", back_populates="columns")
    tasks = relationship(
        "Task",
        back_populates="column",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
