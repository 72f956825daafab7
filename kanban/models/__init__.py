"""SQLAlchemy models."""

from kanban.models.board import Board
from kanban.models.column import BoardColumn
from kanban.models.task import Task
from kanban.models.user import User

__all__ = [
    "User",
    "Board",
    "BoardColumn",
    "Task",
]
