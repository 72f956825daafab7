"""Pydantic schemas for API requests and responses."""

from kanban.schemas.auth import (
    AuthResponse,
    PasswordChange,
    ProfileUpdate,
    UserLogin,
    UserRegister,
    UserResponse,
)
from kanban.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from kanban.schemas.column import (
    ColumnCreate,
    ColumnOrder,
    ColumnReorder,
    ColumnResponse,
    ColumnUpdate,
)
from kanban.schemas.task import TaskCreate, TaskMove, TaskResponse, TaskUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "ProfileUpdate",
    "PasswordChange",
    "UserResponse",
    "AuthResponse",
    "BoardCreate",
    "BoardUpdate",
    "BoardResponse",
    "ColumnCreate",
    "ColumnUpdate",
    "ColumnOrder",
    "ColumnReorder",
    "ColumnResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskMove",
    "TaskResponse",
]
