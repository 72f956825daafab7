"""Column API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.api.dependencies import get_current_user
from kanban.database import get_db
from kanban.models.user import User
from kanban.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from kanban.schemas.task import TaskResponse
from kanban.services import columns as column_service

router = APIRouter(prefix="/api/columns", tags=["columns"])


@router.post("", response_model=ColumnResponse, status_code=status.HTTP_201_CREATED)
def create_column(
    column_data: ColumnCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new column on a board."""
    return column_service.create_column(db, current_user.id, column_data)


@router.get("/{column_id}", response_model=ColumnResponse)
def get_column(
    column_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific column."""
    return column_service.get_column(db, column_id, current_user.id)


@router.patch("/{column_id}", response_model=ColumnResponse)
def update_column(
    column_id: str,
    column_data: ColumnUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename or reposition a column."""
    return column_service.update_column(
        db, column_id, current_user.id, column_data.model_dump(exclude_unset=True)
    )


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    column_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a column and its tasks."""
    column_service.delete_column(db, column_id, current_user.id)


@router.get("/{column_id}/tasks", response_model=list[TaskResponse])
def get_column_tasks(
    column_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get the tasks in a column."""
    return column_service.list_column_tasks(db, column_id, current_user.id)
