"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from kanban.api.dependencies import get_current_user
from kanban.database import get_db
from kanban.models.user import User
from kanban.schemas.task import TaskCreate, TaskMove, TaskResponse, TaskUpdate
from kanban.services import tasks as task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def get_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get every task across the current user's boards."""
    return task_service.list_tasks(db, current_user.id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a task in a column."""
    return task_service.create_task(db, current_user.id, task_data)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific task."""
    return task_service.get_task(db, task_id, current_user.id)


@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a task."""
    return task_service.update_task(
        db, task_id, current_user.id, task_data.model_dump(exclude_unset=True)
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a task."""
    task_service.delete_task(db, task_id, current_user.id)


@router.patch("/{task_id}/move", response_model=TaskResponse)
def move_task(
    task_id: str,
    move_data: TaskMove,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Move a task to another column."""
    return task_service.move_task(db, task_id, current_user.id, move_data.column_id)
