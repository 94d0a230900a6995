"""Item schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from peeky.schemas.common import SqliteInt


class ItemCreate(BaseModel):
    """Create a new item."""

    category_id: SqliteInt
    label: str
    value: str | None = None


class ItemUpdate(BaseModel):
    """Update an item. Fields left as None keep their current value."""

    id: SqliteInt
    label: str | None = None
    value: str | None = None
    sort_order: SqliteInt | None = None


class ItemResponse(BaseModel):
    """Item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    label: str
    value: str
    sort_order: int
    created_at: datetime
    updated_at: datetime


class ItemWithCategoryResponse(BaseModel):
    """Flat item row joined with its category, as shown in the overlay."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    label: str
    value: str
    sort_order: int
    category_name: str
    category_sort_order: int
