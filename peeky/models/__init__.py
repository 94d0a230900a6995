"""SQLAlchemy models."""

from peeky.models.category import Category
from peeky.models.item import Item

__all__ = [
    "Category",
    "Item",
]
