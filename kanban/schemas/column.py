"""Column schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# "order" is a 32-bit INTEGER column
ORDER_MIN = -(2**31)
ORDER_MAX = 2**31 - 1


class ColumnCreate(BaseModel):
    """Create a new column on a board."""

    model_config = ConfigDict(populate_by_name=True)

    board_id: str = Field(..., alias="boardId", min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    order: int = Field(..., ge=ORDER_MIN, le=ORDER_MAX)


class ColumnUpdate(BaseModel):
    """Update a column."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    order: int | None = Field(None, ge=ORDER_MIN, le=ORDER_MAX)

    @field_validator("title", "order")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ColumnOrder(BaseModel):
    """New position for one column."""

    id: str
    order: int = Field(..., ge=ORDER_MIN, le=ORDER_MAX)


class ColumnReorder(BaseModel):
    """Bulk column reorder request."""

    model_config = ConfigDict(populate_by_name=True)

    column_orders: list[ColumnOrder] = Field(..., alias="columnOrders")

    @field_validator("column_orders", mode="before")
    @classmethod
    def must_be_list(cls, v):
        if not isinstance(v, list):
            raise ValueError("columnOrders must be an array")
        return v


class ColumnResponse(BaseModel):
    """Column response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    board_id: str = Field(..., alias="boardId")
    title: str
    order: int
