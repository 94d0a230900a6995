"""Category commands."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from peeky.api.dependencies import get_category_service
from peeky.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from peeky.schemas.common import INT64_MAX, INT64_MIN, SqliteInt
from peeky.services.category_service import CategoryService

router = APIRouter(prefix="/invoke", tags=["categories"])

Service = Annotated[CategoryService, Depends(get_category_service)]


@router.post("/get_categories", response_model=list[CategoryResponse])
def get_categories(service: Service):
    """Get all categories in display order."""
    return service.get_categories()


@router.post("/create_category", response_model=CategoryResponse)
def create_category(
    category_data: Annotated[CategoryCreate, Body(embed=True, alias="input")],
    service: Service,
):
    """Create a category after the last one."""
    return service.create_category(category_data)


@router.post("/update_category", response_model=CategoryResponse)
def update_category(
    category_data: Annotated[CategoryUpdate, Body(embed=True, alias="input")],
    service: Service,
):
    """Update a category's name and/or position."""
    return service.update_category(category_data)


@router.post("/delete_category", response_model=None)
def delete_category(
    category_id: Annotated[int, Body(embed=True, alias="id", ge=INT64_MIN, le=INT64_MAX)],
    service: Service,
) -> None:
    """Delete a category and all of its items."""
    service.delete_category(category_id)


@router.post("/reorder_categories", response_model=None)
def reorder_categories(
    ids: Annotated[list[SqliteInt], Body(embed=True)],
    service: Service,
) -> None:
    """Reorder categories to match the given id sequence."""
    service.reorder_categories(ids)
