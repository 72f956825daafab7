"""Board schemas.

Field names are the storage (snake_case) names; each alias is the camelCase
key used on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BoardCreate(BaseModel):
    """Create a new board."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=50)
    description: str | None = Field(None, max_length=2000)


class BoardUpdate(BaseModel):
    """Update a board. Only these keys are accepted."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    color: str | None = Field(None, min_length=1, max_length=50)
    is_starred: bool | None = Field(None, alias="isStarred")

    @field_validator("title", "color", "is_starred")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("description")
    @classmethod
    def empty_description(cls, v):
        return "" if v is None else v


class BoardResponse(BaseModel):
    """Board response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: str = Field(..., alias="userId")
    title: str
    description: str
    color: str
    last_updated: int = Field(..., alias="lastUpdated")
    last_viewed: int | None = Field(None, alias="lastViewed")
    is_starred: bool = Field(False, alias="isStarred")
