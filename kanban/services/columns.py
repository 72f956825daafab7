"""Column operations."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from kanban.database import transaction
from kanban.errors import ValidationError
from kanban.models.column import BoardColumn
from kanban.models.task import Task
from kanban.schemas.column import ColumnCreate
from kanban.services.boards import ensure_updatable, touch_board
from kanban.services.ownership import verify_board_ownership, verify_column_ownership

logger = logging.getLogger(__name__)

COLUMN_UPDATABLE_FIELDS = frozenset({"title", "order"})


def get_column(db: Session, column_id: str, user_id: str) -> BoardColumn:
    verify_column_ownership(db, column_id, user_id)
    return db.query(BoardColumn).filter(BoardColumn.id == column_id).one()


def list_column_tasks(db: Session, column_id: str, user_id: str) -> list[Task]:
    """Tasks of an owned column, oldest first."""
    verify_column_ownership(db, column_id, user_id)
    return db.query(Task).filter(Task.column_id == column_id).order_by(Task.created_at).all()


def create_column(db: Session, user_id: str, data: ColumnCreate) -> BoardColumn:
    with transaction(db):
        verify_board_ownership(db, data.board_id, user_id)

        column = BoardColumn(board_id=data.board_id, title=data.title, order=data.order)
        db.add(column)
        db.flush()

        touch_board(db, data.board_id)

    db.refresh(column)
    return column


def update_column(db: Session, column_id: str, user_id: str, updates: dict[str, Any]) -> BoardColumn:
    """Apply allow-listed fields and bump the parent board, atomically."""
    ensure_updatable(updates, COLUMN_UPDATABLE_FIELDS)

    with transaction(db):
        board_id = verify_column_ownership(db, column_id, user_id)
        if not updates:
            raise ValidationError("No fields to update")

        db.query(BoardColumn).filter(BoardColumn.id == column_id).update(
            {getattr(BoardColumn, key): value for key, value in updates.items()},
            synchronize_session="fetch",
        )
        touch_board(db, board_id)

    return get_column(db, column_id, user_id)


def delete_column(db: Session, column_id: str, user_id: str) -> None:
    """Delete a column (its tasks go with it via ON DELETE CASCADE)."""
    with transaction(db):
        board_id = verify_column_ownership(db, column_id, user_id)
        db.query(BoardColumn).filter(BoardColumn.id == column_id).delete(
            synchronize_session="fetch"
        )
        touch_board(db, board_id)
    logger.info(f"Deleted column {column_id} from board {board_id}")
