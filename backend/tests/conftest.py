"""
Foodie Finds API: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own SQLite file under tmp_path, created with the
       restaurants/dishes schema and a small fixed data set. The app under
       test is built with create_app(database=...) and driven through an
       HTTPX AsyncClient on ASGITransport (no server, no lifespan).

Fixtures:
    ├── db_path:          Seeded SQLite file
    ├── empty_db_path:    SQLite file without any tables
    ├── database:         Opened Database on db_path
    ├── test_client:      AsyncClient against an app serving `database`
    ├── unopened_client:  AsyncClient against an app whose handle never opened
    └── mock_db:          AsyncMock standing in for Database in service tests
"""

import os
import sqlite3
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test-not-used.sqlite"
os.environ["LOG_LEVEL"] = "WARNING"

from foodie_finds.database import Database  # noqa: E402


RESTAURANTS = [
    # id, name, cuisine, rating, isVeg, hasOutdoorSeating, isLuxury
    (1, "Spice Kitchen", "Indian", 4.5, "true", "true", "false"),
    (2, "Olive Bistro", "Italian", 4.1, "false", "false", "true"),
    (3, "Green Leaf", "Indian", 4.8, "true", "false", "false"),
    (4, "Trattoria Luigi", "Italian", 3.9, "false", "true", "true"),
]

DISHES = [
    # id, name, price, rating, isVeg
    (1, "Paneer Butter Masala", 250, 4.5, "true"),
    (2, "Chicken Alfredo Pasta", 300, 4.0, "false"),
    (3, "Veg Biryani", 180, 4.2, "true"),
    (4, "Margherita Pizza", 220, 4.3, "true"),
]


def _seed(path: str) -> None:
    conn = sqlite3.connect(path)
    try:
        conn.executescript(
            """
            CREATE TABLE restaurants (
                id INTEGER PRIMARY KEY,
                name TEXT,
                cuisine TEXT,
                rating REAL,
                isVeg TEXT,
                hasOutdoorSeating TEXT,
                isLuxury TEXT
            );
            CREATE TABLE dishes (
                id INTEGER PRIMARY KEY,
                name TEXT,
                price REAL,
                rating REAL,
                isVeg TEXT
            );
            """
        )
        conn.executemany("INSERT INTO restaurants VALUES (?, ?, ?, ?, ?, ?, ?)", RESTAURANTS)
        conn.executemany("INSERT INTO dishes VALUES (?, ?, ?, ?, ?)", DISHES)
        conn.commit()
    finally:
        conn.close()


def sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def db_path(tmp_path):
    """A SQLite file holding the RESTAURANTS and DISHES rows."""
    path = str(tmp_path / "database.sqlite")
    _seed(path)
    return path


@pytest.fixture
def empty_db_path(tmp_path):
    """A valid SQLite file with no tables: every data query fails."""
    path = str(tmp_path / "empty.sqlite")
    sqlite3.connect(path).close()
    return path


@pytest_asyncio.fixture
async def database(db_path):
    db = Database(sqlite_url(db_path))
    assert await db.open()
    yield db
    await db.close()


async def _client_for(db: Database):
    from foodie_finds.main import create_app
    app = create_app(database=db)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(database):
    """
    Usage:
        async def test_dishes(test_client):
            response = await test_client.get("/dishes")
            assert response.status_code == 200
    """
    async with await _client_for(database) as client:
        yield client


@pytest_asyncio.fixture
async def unopened_client(db_path):
    """App whose storage handle was never opened, as after a failed startup."""
    async with await _client_for(Database(sqlite_url(db_path))) as client:
        yield client


@pytest.fixture
def mock_db():
    """
    A mock storage handle for query-layer unit tests.

    Usage:
        mock_db.fetch_all.return_value = [{"id": 1}]
        result = await restaurant_service.fetch_all_restaurants(mock_db)
    """
    db = AsyncMock(spec=Database)
    db.fetch_all = AsyncMock(return_value=[])
    return db
