"""FastAPI dependencies for services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from peeky.database import get_db
from peeky.services.category_service import CategoryService
from peeky.services.item_service import ItemService


def get_category_service(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryService:
    """Get category service bound to the request session."""
    return CategoryService(db)


def get_item_service(
    db: Annotated[Session, Depends(get_db)],
) -> ItemService:
    """Get item service bound to the request session."""
    return ItemService(db)
