"""Category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from peeky.schemas.common import SqliteInt


class CategoryCreate(BaseModel):
    """Create a new category."""

    name: str


class CategoryUpdate(BaseModel):
    """Update a category. Fields left as None keep their current value."""

    id: SqliteInt
    name: str | None = None
    sort_order: SqliteInt | None = None


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    sort_order: int
    created_at: datetime
    updated_at: datetime
