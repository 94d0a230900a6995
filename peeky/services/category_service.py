"""Category data access."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from peeky.database import commit
from peeky.exceptions import NotFoundError
from peeky.models.category import Category
from peeky.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category CRUD and ordering."""

    def __init__(self, db: Session):
        self.db = db

    def get_categories(self) -> list[Category]:
        """Get all categories in display order."""
        return self.db.query(Category).order_by(Category.sort_order, Category.id).all()

    def get_category(self, category_id: int) -> Category:
        """Get a category by id, raising NotFoundError if it does not exist."""
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            logger.warning(f"Category {category_id} not found")
            raise NotFoundError("Category", category_id)
        return category

    def next_sort_order(self) -> int:
        max_order = self.db.query(func.coalesce(func.max(Category.sort_order), -1)).scalar()
        return max_order + 1

    def create_category(self, data: CategoryCreate) -> Category:
        """Create a category at the end of the current ordering."""
        category = Category(name=data.name, sort_order=self.next_sort_order())
        self.db.add(category)
        commit(self.db)
        self.db.refresh(category)
        logger.info(f"Created category {category.id} '{category.name}'")
        return category

    def update_category(self, data: CategoryUpdate) -> Category:
        """Update the supplied fields of a category."""
        category = self.get_category(data.id)

        if data.name is not None:
            category.name = data.name
        if data.sort_order is not None:
            category.sort_order = data.sort_order

        category.touch()

        commit(self.db)
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int) -> None:
        """Delete a category and, through the foreign key cascade, its items."""
        category = self.get_category(category_id)

        self.db.delete(category)
        commit(self.db)
        logger.info(f"Deleted category {category_id}")

    def reorder_categories(self, ids: list[int]) -> None:
        """Set each category's sort_order to its index in ids.

        Unknown ids are skipped.
        """
        for index, category_id in enumerate(ids):
            self.db.query(Category).filter(Category.id == category_id).update(
                {Category.sort_order: index}, synchronize_session=False
            )
        commit(self.db)
        self.db.expire_all()
        logger.info(f"Reordered {len(ids)} categories")
