"""Board API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.api.dependencies import get_current_user
from kanban.database import get_db
from kanban.models.user import User
from kanban.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from kanban.schemas.column import ColumnReorder, ColumnResponse
from kanban.schemas.task import TaskResponse
from kanban.services import boards as board_service

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("", response_model=list[BoardResponse])
def get_boards(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get all boards of the current user, most recently updated first."""
    return board_service.list_boards(db, current_user.id)


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    board_data: BoardCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a board seeded with To Do / In Progress / Done columns."""
    return board_service.create_board(db, current_user.id, board_data)


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific board."""
    return board_service.get_board(db, board_id, current_user.id)


@router.patch("/{board_id}", response_model=BoardResponse)
def update_board(
    board_id: str,
    board_data: BoardUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a board."""
    return board_service.update_board(
        db, board_id, current_user.id, board_data.model_dump(exclude_unset=True)
    )


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a board with all of its columns and tasks."""
    board_service.delete_board(db, board_id, current_user.id)


@router.patch("/{board_id}/star", response_model=BoardResponse)
def toggle_board_star(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Star or unstar a board."""
    return board_service.toggle_star(db, board_id, current_user.id)


@router.patch("/{board_id}/view", response_model=BoardResponse)
def mark_board_as_viewed(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Record that the board was just opened."""
    return board_service.mark_viewed(db, board_id, current_user.id)


@router.get("/{board_id}/columns", response_model=list[ColumnResponse])
def get_board_columns(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get the columns of a board in display order."""
    return board_service.list_board_columns(db, board_id, current_user.id)


@router.get("/{board_id}/tasks", response_model=list[TaskResponse])
def get_board_tasks(
    board_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get every task on a board."""
    return board_service.list_board_tasks(db, board_id, current_user.id)


@router.patch("/{board_id}/columns/reorder", response_model=list[ColumnResponse])
def reorder_columns(
    board_id: str,
    reorder_data: ColumnReorder,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Reorder a board's columns."""
    return board_service.reorder_columns(
        db, board_id, current_user.id, reorder_data.column_orders
    )
