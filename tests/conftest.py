"""Shared test configuration and fixtures.

Every test gets its own SQLite database file under ``tmp_path`` so tests are
fully isolated and identifiers always start at 1.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hoteldesk.api.deps import get_database
from hoteldesk.database import Database
from hoteldesk.main import app
from hoteldesk.services import GuestDirectory, ReservationRegistry, RoomDirectory

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Open a fresh file-backed SQLite database and close it afterwards."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'hoteldesk-test.db'}")
    await db.open()
    try:
        yield db
    finally:
        await db.close()


@pytest_asyncio.fixture
async def registry(database: Database) -> ReservationRegistry:
    return ReservationRegistry(database)


@pytest_asyncio.fixture
async def guests(database: Database) -> GuestDirectory:
    return GuestDirectory(database)


@pytest_asyncio.fixture
async def rooms(database: Database) -> RoomDirectory:
    return RoomDirectory(database)


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the per-test database."""
    app.dependency_overrides[get_database] = lambda: database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: guest, room helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_guest(client: AsyncClient) -> dict:
    """Create and return a test guest via the API."""
    response = await client.post(
        "/api/guests",
        json={"name": "Alice", "email": "alice@example.com", "phone": "+33612345678"},
    )
    assert response.status_code == 201, f"Failed to create test guest: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_room(client: AsyncClient) -> dict:
    """Create and return a test room via the API."""
    response = await client.post(
        "/api/rooms",
        json={"number": "101", "type": "double", "price": 120.0},
    )
    assert response.status_code == 201, f"Failed to create test room: {response.text}"
    return response.json()
