"""Board operations and the board-timestamp helpers shared by columns and tasks."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import not_, select
from sqlalchemy.orm import Session

from kanban.database import transaction
from kanban.errors import NotFoundError, ValidationError
from kanban.models.board import Board
from kanban.models.column import BoardColumn
from kanban.models.mixins import now_ms
from kanban.models.task import Task
from kanban.schemas.board import BoardCreate
from kanban.schemas.column import ColumnOrder
from kanban.services.ownership import verify_board_ownership

logger = logging.getLogger(__name__)

# Seeded on every new board: (title, order)
DEFAULT_COLUMNS = [
    ("To Do", 0),
    ("In Progress", 1),
    ("Done", 2),
]

BOARD_UPDATABLE_FIELDS = frozenset({"title", "description", "color", "is_starred"})


def ensure_updatable(updates: Mapping[str, Any], allowed: Iterable[str]) -> None:
    """Reject any key outside the resource's allow-list."""
    unknown = sorted(set(updates) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown field: {', '.join(unknown)}")


def touch_board(db: Session, board_id: str) -> None:
    """Set a board's last_updated to now."""
    db.query(Board).filter(Board.id == board_id).update(
        {Board.last_updated: now_ms()}, synchronize_session="fetch"
    )


def touch_board_of_column(db: Session, column_id: str) -> None:
    """Set last_updated on the board that holds the column."""
    board_id = select(BoardColumn.board_id).where(BoardColumn.id == column_id).scalar_subquery()
    db.query(Board).filter(Board.id == board_id).update(
        {Board.last_updated: now_ms()}, synchronize_session="fetch"
    )


def list_boards(db: Session, user_id: str) -> list[Board]:
    """All boards of the user, most recently updated first."""
    return (
        db.query(Board).filter(Board.user_id == user_id).order_by(Board.last_updated.desc()).all()
    )


def get_board(db: Session, board_id: str, user_id: str) -> Board:
    board = db.query(Board).filter(Board.id == board_id, Board.user_id == user_id).first()
    if board is None:
        raise NotFoundError("Board not found")
    return board


def create_board(db: Session, user_id: str, data: BoardCreate) -> Board:
    """Create a board together with its default columns, atomically."""
    with transaction(db):
        board = Board(
            user_id=user_id,
            title=data.title,
            description=data.description or "",
            color=data.color,
            last_updated=now_ms(),
            is_starred=False,
        )
        db.add(board)
        db.flush()

        for title, order in DEFAULT_COLUMNS:
            db.add(BoardColumn(board_id=board.id, title=title, order=order))
        db.flush()

    db.refresh(board)
    logger.info(f"Created board {board.id} for user {user_id}")
    return board


def update_board(db: Session, board_id: str, user_id: str, updates: dict[str, Any]) -> Board:
    """Apply allow-listed fields and bump last_updated in a single UPDATE."""
    ensure_updatable(updates, BOARD_UPDATABLE_FIELDS)

    values = {getattr(Board, key): value for key, value in updates.items()}
    values[Board.last_updated] = now_ms()

    with transaction(db):
        updated = (
            db.query(Board)
            .filter(Board.id == board_id, Board.user_id == user_id)
            .update(values, synchronize_session="fetch")
        )
        if not updated:
            raise NotFoundError("Board not found")

    return get_board(db, board_id, user_id)


def delete_board(db: Session, board_id: str, user_id: str) -> None:
    """Delete an owned board; the database cascades to its columns and tasks."""
    with transaction(db):
        deleted = (
            db.query(Board)
            .filter(Board.id == board_id, Board.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
        if not deleted:
            raise NotFoundError("Board not found")
    logger.info(f"Deleted board {board_id}")


def toggle_star(db: Session, board_id: str, user_id: str) -> Board:
    """Flip is_starred in the database, not read-then-write."""
    with transaction(db):
        updated = (
            db.query(Board)
            .filter(Board.id == board_id, Board.user_id == user_id)
            .update(
                {Board.is_starred: not_(Board.is_starred), Board.last_updated: now_ms()},
                synchronize_session="fetch",
            )
        )
        if not updated:
            raise NotFoundError("Board not found")

    return get_board(db, board_id, user_id)


def mark_viewed(db: Session, board_id: str, user_id: str) -> Board:
    timestamp = now_ms()
    with transaction(db):
        updated = (
            db.query(Board)
            .filter(Board.id == board_id, Board.user_id == user_id)
            .update(
                {Board.last_viewed: timestamp, Board.last_updated: timestamp},
                synchronize_session="fetch",
            )
        )
        if not updated:
            raise NotFoundError("Board not found")

    return get_board(db, board_id, user_id)


def list_board_columns(db: Session, board_id: str, user_id: str) -> list[BoardColumn]:
    """Columns of an owned board in display order."""
    verify_board_ownership(db, board_id, user_id)
    return (
        db.query(BoardColumn)
        .filter(BoardColumn.board_id == board_id)
        .order_by(BoardColumn.order)
        .all()
    )


def list_board_tasks(db: Session, board_id: str, user_id: str) -> list[Task]:
    verify_board_ownership(db, board_id, user_id)
    return (
        db.query(Task)
        .join(BoardColumn, Task.column_id == BoardColumn.id)
        .filter(BoardColumn.board_id == board_id)
        .order_by(Task.created_at)
        .all()
    )


def reorder_columns(
    db: Session, board_id: str, user_id: str, column_orders: list[ColumnOrder]
) -> list[BoardColumn]:
    """Apply new column positions, then renumber the board's columns 0..n-1.

    Every id must belong to the board; otherwise nothing is changed.
    """
    with transaction(db):
        verify_board_ownership(db, board_id, user_id)

        columns = {
            column.id: column
            for column in db.query(BoardColumn).filter(BoardColumn.board_id == board_id).all()
        }
        previous = {column_id: column.order for column_id, column in columns.items()}

        for entry in column_orders:
            column = columns.get(entry.id)
            if column is None:
                raise NotFoundError("Column not found or access denied")
            column.order = entry.order

        ranked = sorted(columns.values(), key=lambda c: (c.order, previous[c.id]))
        for index, column in enumerate(ranked):
            column.order = index
        db.flush()

        touch_board(db, board_id)

    logger.info(f"Reordered {len(column_orders)} columns on board {board_id}")
    return list_board_columns(db, board_id, user_id)
