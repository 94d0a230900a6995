"""Pydantic schemas for command inputs and results."""

from peeky.schemas.app import AppInfo
from peeky.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from peeky.schemas.item import ItemCreate, ItemResponse, ItemUpdate, ItemWithCategoryResponse

__all__ = [
    "AppInfo",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "ItemWithCategoryResponse",
]
