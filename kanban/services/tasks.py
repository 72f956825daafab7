"""Task operations."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from kanban.database import transaction
from kanban.errors import ValidationError
from kanban.models.board import Board
from kanban.models.column import BoardColumn
from kanban.models.enums import Priority
from kanban.models.task import Task
from kanban.schemas.task import INVALID_PRIORITY, TaskCreate
from kanban.services.boards import ensure_updatable, touch_board_of_column
from kanban.services.ownership import verify_column_ownership, verify_task_ownership

logger = logging.getLogger(__name__)

TASK_UPDATABLE_FIELDS = frozenset({"title", "description", "priority", "due_date", "column_id"})


def list_tasks(db: Session, user_id: str) -> list[Task]:
    """Every task on the user's boards, newest first."""
    return (
        db.query(Task)
        .join(BoardColumn, Task.column_id == BoardColumn.id)
        .join(Board, BoardColumn.board_id == Board.id)
        .filter(Board.user_id == user_id)
        .order_by(Task.created_at.desc())
        .all()
    )


def get_task(db: Session, task_id: str, user_id: str) -> Task:
    verify_task_ownership(db, task_id, user_id)
    return db.query(Task).filter(Task.id == task_id).one()


def create_task(db: Session, user_id: str, data: TaskCreate) -> Task:
    with transaction(db):
        verify_column_ownership(db, data.column_id, user_id)

        task = Task(
            column_id=data.column_id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            due_date=data.due_date,
        )
        db.add(task)
        db.flush()

        touch_board_of_column(db, data.column_id)

    db.refresh(task)
    return task


def update_task(db: Session, task_id: str, user_id: str, updates: dict[str, Any]) -> Task:
    """Apply allow-listed fields and bump the owning board, atomically.

    A new column_id must belong to one of the user's boards, same as move_task.
    """
    ensure_updatable(updates, TASK_UPDATABLE_FIELDS)

    with transaction(db):
        column_id = verify_task_ownership(db, task_id, user_id)
        if not updates:
            raise ValidationError("No fields to update")
        if "priority" in updates and updates["priority"] not in Priority.values():
            raise ValidationError(INVALID_PRIORITY)
        if "column_id" in updates:
            verify_column_ownership(db, updates["column_id"], user_id)
            column_id = updates["column_id"]

        db.query(Task).filter(Task.id == task_id).update(
            {getattr(Task, key): value for key, value in updates.items()},
            synchronize_session="fetch",
        )
        touch_board_of_column(db, column_id)

    return get_task(db, task_id, user_id)


def move_task(db: Session, task_id: str, user_id: str, column_id: str) -> Task:
    """Reassign a task to another column the user owns."""
    with transaction(db):
        verify_task_ownership(db, task_id, user_id)
        verify_column_ownership(db, column_id, user_id)

        db.query(Task).filter(Task.id == task_id).update(
            {Task.column_id: column_id}, synchronize_session="fetch"
        )
        touch_board_of_column(db, column_id)

    return get_task(db, task_id, user_id)


def delete_task(db: Session, task_id: str, user_id: str) -> None:
    with transaction(db):
        column_id = verify_task_ownership(db, task_id, user_id)
        db.query(Task).filter(Task.id == task_id).delete(synchronize_session="fetch")
        touch_board_of_column(db, column_id)
