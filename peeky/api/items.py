"""Item commands."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from peeky.api.dependencies import get_item_service
from peeky.schemas.common import INT64_MAX, INT64_MIN, SqliteInt
from peeky.schemas.item import ItemCreate, ItemResponse, ItemUpdate, ItemWithCategoryResponse
from peeky.services.item_service import ItemService

router = APIRouter(prefix="/invoke", tags=["items"])

Service = Annotated[ItemService, Depends(get_item_service)]


@router.post("/get_items", response_model=list[ItemResponse])
def get_items(
    category_id: Annotated[int, Body(embed=True, alias="categoryId", ge=INT64_MIN, le=INT64_MAX)],
    service: Service,
):
    """Get the items of a category."""
    return service.get_items(category_id)


@router.post("/get_all_items", response_model=list[ItemWithCategoryResponse])
def get_all_items(service: Service):
    """Get every item with its category name, grouped by category order."""
    return service.get_all_items()


@router.post("/create_item", response_model=ItemResponse)
def create_item(
    item_data: Annotated[ItemCreate, Body(embed=True, alias="input")],
    service: Service,
):
    """Create an item at the end of its category."""
    return service.create_item(item_data)


@router.post("/update_item", response_model=ItemResponse)
def update_item(
    item_data: Annotated[ItemUpdate, Body(embed=True, alias="input")],
    service: Service,
):
    """Update an item's label, value and/or position."""
    return service.update_item(item_data)


@router.post("/delete_item", response_model=None)
def delete_item(
    item_id: Annotated[int, Body(embed=True, alias="id", ge=INT64_MIN, le=INT64_MAX)],
    service: Service,
) -> None:
    """Delete an item."""
    service.delete_item(item_id)


@router.post("/reorder_items", response_model=None)
def reorder_items(
    category_id: Annotated[int, Body(alias="categoryId", ge=INT64_MIN, le=INT64_MAX)],
    ids: Annotated[list[SqliteInt], Body()],
    service: Service,
) -> None:
    """Reorder a category's items to match the given id sequence."""
    service.reorder_items(category_id, ids)
