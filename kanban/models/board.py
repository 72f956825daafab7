"""Board model."""

from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, String
from sqlalchemy.orm import backref, relationship

from kanban.database import Base
from kanban.models.mixins import generate_id, now_ms


class Board(Base):
    """A Kanban board owned by exactly one user."""

    __tablename__ = "boards"

    id = Column(String(32), primary_key=True, default=generate_id)
    user_id = Column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=False, default="")
    color = Column(String(50), nullable=False)
    # epoch milliseconds
    last_updated = Column(BigInteger, nullable=False, default=now_ms, index=True)
    last_viewed = Column(BigInteger, nullable=True)
    is_starred = Column(Boolean, nullable=False, default=False)

    # Relationships
    owner = relationship("User", backref=backref("boards", passive_deletes=True))
    columns = relationship(
        "BoardColumn",
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BoardColumn.order",
    )
