#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a few shortcut categories with representative items. Existing
categories with the same names are removed first, so the script can be re-run.

Usage:
    # From project root, against the default app database:
    python scripts/seed_demo_data.py

    # Or against a specific file:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from peeky.database import SessionLocal, commit, init_db
from peeky.models import Category
from peeky.schemas import CategoryCreate, ItemCreate
from peeky.services import CategoryService, ItemService

DEMO_CATEGORIES: dict[str, list[tuple[str, str]]] = {
    "macOS": [
        ("Spotlight", "Cmd+Space"),
        ("Screenshot (area)", "Cmd+Shift+4"),
        ("Force quit", "Cmd+Option+Esc"),
        ("Lock screen", "Ctrl+Cmd+Q"),
    ],
    "VS Code": [
        ("Command palette", "Cmd+Shift+P"),
        ("Quick open", "Cmd+P"),
        ("Toggle terminal", "Ctrl+`"),
        ("Multi-cursor", "Cmd+Option+Down"),
    ],
    "Browser": [
        ("Reopen closed tab", "Cmd+Shift+T"),
        ("Focus address bar", "Cmd+L"),
        ("Developer tools", "Cmd+Option+I"),
    ],
    "Peeky": [
        ("Toggle overlay", "Ctrl+Option+O"),
        ("Toggle main window", "Ctrl+Option+L"),
    ],
}


def seed_demo_data():
    """Seed the database with representative shortcut categories."""
    init_db()
    session = SessionLocal()

    try:
        existing = session.query(Category).filter(Category.name.in_(list(DEMO_CATEGORIES))).all()
        if existing:
            print("Demo data already exists. Clearing and re-seeding...")
            for category in existing:
                session.delete(category)
            commit(session)

        categories = CategoryService(session)
        items = ItemService(session)

        for name, shortcuts in DEMO_CATEGORIES.items():
            print(f"Creating category {name}...")
            category = categories.create_category(CategoryCreate(name=name))
            for label, value in shortcuts:
                items.create_item(ItemCreate(category_id=category.id, label=label, value=value))

        print(f"Seeded {len(DEMO_CATEGORIES)} categories.")
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
