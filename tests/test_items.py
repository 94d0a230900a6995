"""Item service tests."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from peeky.exceptions import NotFoundError
from peeky.schemas import CategoryCreate, ItemCreate, ItemUpdate


def test_get_items_returns_empty_for_category(item_service, shortcuts_category):
    """Test that a new category has no items."""
    assert item_service.get_items(shortcuts_category.id) == []


def test_create_item_returns_new_item(item_service, shortcuts_category):
    """Test creating an item."""
    item = item_service.create_item(
        ItemCreate(category_id=shortcuts_category.id, label="Copy", value="Cmd+C")
    )

    assert item.label == "Copy"
    assert item.value == "Cmd+C"
    assert item.category_id == shortcuts_category.id
    assert item.sort_order == 0


def test_create_item_defaults_value_to_empty(make_item, shortcuts_category):
    """Test that value is optional."""
    item = make_item(shortcuts_category.id, "Label only")

    assert item.value == ""


def test_create_item_auto_increments_sort_order(make_item, shortcuts_category):
    """Test that new items go after the last one in their category."""
    first = make_item(shortcuts_category.id, "A")
    second = make_item(shortcuts_category.id, "B")

    assert first.sort_order == 0
    assert second.sort_order == 1


def test_sort_order_is_scoped_per_category(category_service, make_item, shortcuts_category):
    """Test that each category numbers its items from zero."""
    other = category_service.create_category(CategoryCreate(name="Other"))
    make_item(shortcuts_category.id, "A")
    make_item(shortcuts_category.id, "B")

    item = make_item(other.id, "C")

    assert item.sort_order == 0


def test_create_item_in_missing_category_fails(item_service):
    """Test that the foreign key rejects an unknown category."""
    with pytest.raises(IntegrityError) as exc_info:
        item_service.create_item(ItemCreate(category_id=999, label="Orphan"))

    assert "FOREIGN KEY constraint failed" in str(exc_info.value)


def test_get_items_orders_by_sort_order(item_service, make_item, shortcuts_category):
    """Test listing order within a category."""
    a = make_item(shortcuts_category.id, "A")
    make_item(shortcuts_category.id, "B")
    item_service.update_item(ItemUpdate(id=a.id, sort_order=5))

    labels = [item.label for item in item_service.get_items(shortcuts_category.id)]
    assert labels == ["B", "A"]


def test_update_item_partial_fields(item_service, make_item, shortcuts_category):
    """Test that omitted fields keep their values."""
    item = make_item(shortcuts_category.id, "Old", "val")

    updated = item_service.update_item(ItemUpdate(id=item.id, label="New"))

    assert updated.label == "New"
    assert updated.value == "val"
    assert updated.sort_order == 0


def test_update_item_value_to_empty_string(item_service, make_item, shortcuts_category):
    """Test that an explicit empty value is applied, not treated as omitted."""
    item = make_item(shortcuts_category.id, "Copy", "Cmd+C")

    updated = item_service.update_item(ItemUpdate(id=item.id, value=""))

    assert updated.label == "Copy"
    assert updated.value == ""


def test_update_item_not_found(item_service):
    """Test updating a missing item."""
    with pytest.raises(NotFoundError) as exc_info:
        item_service.update_item(ItemUpdate(id=999, label="Nope"))

    assert str(exc_info.value) == "Item 999 not found"


def test_delete_item_removes_it(item_service, make_item, shortcuts_category):
    """Test deleting an item."""
    item = make_item(shortcuts_category.id, "Del")

    item_service.delete_item(item.id)

    assert item_service.get_items(shortcuts_category.id) == []


def test_delete_item_not_found(item_service):
    """Test deleting a missing item."""
    with pytest.raises(NotFoundError):
        item_service.delete_item(999)


def test_get_all_items_joins_categories(item_service, make_item, shortcuts_category):
    """Test the flat join used by the overlay."""
    make_item(shortcuts_category.id, "Copy", "Cmd+C")

    rows = item_service.get_all_items()

    assert len(rows) == 1
    assert rows[0].category_name == "Shortcuts"
    assert rows[0].category_sort_order == 0
    assert rows[0].label == "Copy"
    assert rows[0].value == "Cmd+C"


def test_get_all_items_orders_by_category_then_item(
    category_service, item_service, make_item
):
    """Test that rows follow category order, then item order."""
    first = category_service.create_category(CategoryCreate(name="First"))
    second = category_service.create_category(CategoryCreate(name="Second"))
    make_item(second.id, "s1")
    make_item(first.id, "f1")
    make_item(first.id, "f2")

    category_service.reorder_categories([second.id, first.id])

    rows = item_service.get_all_items()
    assert [(row.category_name, row.label) for row in rows] == [
        ("Second", "s1"),
        ("First", "f1"),
        ("First", "f2"),
    ]


def test_reorder_items_updates_sort_order(item_service, make_item, shortcuts_category):
    """Test reordering the items of a category."""
    a = make_item(shortcuts_category.id, "A")
    b = make_item(shortcuts_category.id, "B")
    c = make_item(shortcuts_category.id, "C")

    item_service.reorder_items(shortcuts_category.id, [c.id, a.id, b.id])

    items = item_service.get_items(shortcuts_category.id)
    assert [(item.label, item.sort_order) for item in items] == [("C", 0), ("A", 1), ("B", 2)]


def test_reorder_items_skips_other_categories(
    category_service, item_service, make_item, shortcuts_category
):
    """Test that ids from another category are left alone."""
    other = category_service.create_category(CategoryCreate(name="Other"))
    a = make_item(shortcuts_category.id, "A")
    b = make_item(shortcuts_category.id, "B")
    foreign = make_item(other.id, "X")

    item_service.reorder_items(shortcuts_category.id, [foreign.id, b.id, a.id])

    assert [(i.label, i.sort_order) for i in item_service.get_items(shortcuts_category.id)] == [
        ("B", 1),
        ("A", 2),
    ]
    assert item_service.get_items(other.id)[0].sort_order == 0


def backdate_items(db):
    db.execute(text("UPDATE items SET updated_at = '2000-01-01 00:00:00'"))
    db.commit()
    db.expire_all()


def test_update_item_without_fields_refreshes_updated_at(
    db, item_service, make_item, shortcuts_category
):
    """Test that an update with nothing supplied still bumps updated_at."""
    item = make_item(shortcuts_category.id, "Copy", "Cmd+C")
    backdate_items(db)
    assert item.updated_at.year == 2000

    updated = item_service.update_item(ItemUpdate(id=item.id))

    assert (updated.label, updated.value, updated.sort_order) == ("Copy", "Cmd+C", 0)
    assert updated.updated_at.year > 2000


def test_reorder_items_refreshes_updated_at(db, item_service, make_item, shortcuts_category):
    """Test that reordering bumps updated_at on the moved items."""
    a = make_item(shortcuts_category.id, "A")
    b = make_item(shortcuts_category.id, "B")
    backdate_items(db)

    item_service.reorder_items(shortcuts_category.id, [b.id, a.id])

    items = item_service.get_items(shortcuts_category.id)
    assert all(item.updated_at.year > 2000 for item in items)
