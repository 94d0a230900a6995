"""Data-access services for categories and items."""

from peeky.services.category_service import CategoryService
from peeky.services.item_service import ItemService

__all__ = ["CategoryService", "ItemService"]
