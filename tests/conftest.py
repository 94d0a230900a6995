"""Pytest configuration and fixtures."""

import os
from pathlib import Path

# Point the app at the test database before any peeky module reads settings
TEST_DB_PATH = Path("test.db")
SQLALCHEMY_DATABASE_URL = f"sqlite:///./{TEST_DB_PATH}"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from peeky import models  # noqa: E402, F401
from peeky.database import Base, get_db, init_db  # noqa: E402
from peeky.main import app  # noqa: E402
from peeky.schemas import CategoryCreate, ItemCreate  # noqa: E402
from peeky.services import CategoryService, ItemService  # noqa: E402

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Migrate a fresh test database once at the start of the test session."""
    TEST_DB_PATH.unlink(missing_ok=True)
    init_db()
    yield
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def category_service(db):
    return CategoryService(db)


@pytest.fixture
def item_service(db):
    return ItemService(db)


@pytest.fixture
def shortcuts_category(category_service):
    """A category named Shortcuts."""
    return category_service.create_category(CategoryCreate(name="Shortcuts"))


@pytest.fixture
def make_item(item_service):
    """Factory for items in a given category."""

    def _make_item(category_id: int, label: str, value: str | None = None):
        return item_service.create_item(
            ItemCreate(category_id=category_id, label=label, value=value)
        )

    return _make_item
