"""Task schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kanban.models.enums import Priority

INVALID_PRIORITY = "Invalid priority. Must be low, medium, or high"


def _check_priority(v):
    if v not in Priority.values():
        raise ValueError(INVALID_PRIORITY)
    return v


class TaskCreate(BaseModel):
    """Create a new task in a column."""

    model_config = ConfigDict(populate_by_name=True)

    column_id: str = Field(..., alias="columnId", min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    priority: Priority
    description: str | None = Field(None, max_length=5000)
    due_date: date | None = Field(None, alias="dueDate")

    _validate_priority = field_validator("priority", mode="before")(_check_priority)


class TaskUpdate(BaseModel):
    """Update a task. columnId reassigns the task to another owned column."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    column_id: str | None = Field(None, alias="columnId", min_length=1)
    title: str | None = Field(None, min_length=1, max_length=500)
    priority: Priority | None = None
    description: str | None = Field(None, max_length=5000)
    due_date: date | None = Field(None, alias="dueDate")

    _validate_priority = field_validator("priority", mode="before")(_check_priority)

    @field_validator("column_id", "title")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class TaskMove(BaseModel):
    """Move a task to another column."""

    model_config = ConfigDict(populate_by_name=True)

    column_id: str | None = Field(None, alias="columnId")

    @model_validator(mode="after")
    def require_column(self):
        if not self.column_id:
            raise ValueError("columnId is required")
        return self


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    column_id: str = Field(..., alias="columnId")
    title: str
    description: str | None = None
    priority: Priority
    due_date: date | None = Field(None, alias="dueDate")
    created_at: datetime | None = Field(None, alias="createdAt")
