"""Ownership guards for boards, columns and tasks.

Each guard resolves a resource through the column -> board join to a board
owned by the user, and returns the resource's parent id. A missing resource
and another user's resource both raise NotFoundError.

Guards take the caller's session so they run inside its open transaction
and see writes flushed earlier in that transaction.
"""

from sqlalchemy.orm import Session

from kanban.errors import NotFoundError
from kanban.models.board import Board
from kanban.models.column import BoardColumn
from kanban.models.task import Task


def verify_board_ownership(db: Session, board_id: str, user_id: str) -> str:
    """Return the board id if the user owns the board."""
    row = db.query(Board.id).filter(Board.id == board_id, Board.user_id == user_id).first()
    if row is None:
        raise NotFoundError("Board not found")
    return row.id


def verify_column_ownership(db: Session, column_id: str, user_id: str) -> str:
    """Return the column's board id if the user owns that board."""
    row = (
        db.query(BoardColumn.board_id)
        .join(Board, BoardColumn.board_id == Board.id)
        .filter(BoardColumn.id == column_id, Board.user_id == user_id)
        .first()
    )
    if row is None:
        raise NotFoundError("Column not found or access denied")
    return row.board_id


def verify_task_ownership(db: Session, task_id: str, user_id: str) -> str:
    """Return the task's column id if the user owns the board above it."""
    row = (
        db.query(Task.column_id)
        .join(BoardColumn, Task.column_id == BoardColumn.id)
        .join(Board, BoardColumn.board_id == Board.id)
        .filter(Task.id == task_id, Board.user_id == user_id)
        .first()
    )
    if row is None:
        raise NotFoundError("Task not found or access denied")
    return row.column_id
