"""Item data access."""

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from peeky.database import commit
from peeky.exceptions import NotFoundError
from peeky.models.category import Category
from peeky.models.item import Item
from peeky.schemas.item import ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)


class ItemService:
    """Service for item CRUD and ordering within a category."""

    def __init__(self, db: Session):
        self.db = db

    def get_items(self, category_id: int) -> list[Item]:
        """Get the items of one category in display order."""
        return (
            self.db.query(Item)
            .filter(Item.category_id == category_id)
            .order_by(Item.sort_order, Item.id)
            .all()
        )

    def get_all_items(self) -> list[Any]:
        """Get every item joined with its category's name and position.

        Rows are ordered by category position first, then item position, so
        the overlay can group them in a single pass.
        """
        return (
            self.db.query(
                Item.id,
                Item.category_id,
                Item.label,
                Item.value,
                Item.sort_order,
                Category.name.label("category_name"),
                Category.sort_order.label("category_sort_order"),
            )
            .join(Category, Category.id == Item.category_id)
            .order_by(Category.sort_order, Category.id, Item.sort_order, Item.id)
            .all()
        )

    def get_item(self, item_id: int) -> Item:
        """Get an item by id, raising NotFoundError if it does not exist."""
        item = self.db.query(Item).filter(Item.id == item_id).first()
        if not item:
            logger.warning(f"Item {item_id} not found")
            raise NotFoundError("Item", item_id)
        return item

    def next_sort_order(self, category_id: int) -> int:
        max_order = (
            self.db.query(func.coalesce(func.max(Item.sort_order), -1))
            .filter(Item.category_id == category_id)
            .scalar()
        )
        return max_order + 1

    def create_item(self, data: ItemCreate) -> Item:
        """Create an item at the end of its category."""
        item = Item(
            category_id=data.category_id,
            label=data.label,
            value=data.value if data.value is not None else "",
            sort_order=self.next_sort_order(data.category_id),
        )
        self.db.add(item)
        commit(self.db)
        self.db.refresh(item)
        logger.info(f"Created item {item.id} '{item.label}' in category {item.category_id}")
        return item

    def update_item(self, data: ItemUpdate) -> Item:
        """Update the supplied fields of an item."""
        item = self.get_item(data.id)

        if data.label is not None:
            item.label = data.label
        if data.value is not None:
            item.value = data.value
        if data.sort_order is not None:
            item.sort_order = data.sort_order

        item.touch()

        commit(self.db)
        self.db.refresh(item)
        return item

    def delete_item(self, item_id: int) -> None:
        """Delete an item."""
        item = self.get_item(item_id)

        self.db.delete(item)
        commit(self.db)
        logger.info(f"Deleted item {item_id}")

    def reorder_items(self, category_id: int, ids: list[int]) -> None:
        """Set each item's sort_order to its index in ids.

        Only items belonging to category_id are touched; other ids are skipped.
        """
        for index, item_id in enumerate(ids):
            self.db.query(Item).filter(Item.id == item_id, Item.category_id == category_id).update(
                {Item.sort_order: index}, synchronize_session=False
            )
        commit(self.db)
        self.db.expire_all()
        logger.info(f"Reordered {len(ids)} items in category {category_id}")
