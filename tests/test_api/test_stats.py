"""Tests for the dashboard overview and health endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_overview_empty(client: AsyncClient) -> None:
    response = await client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {"guests": 0, "rooms": 0, "reservations": 0, "available_rooms": 0}


async def test_overview_counts(client: AsyncClient, test_guest: dict, test_room: dict) -> None:
    await client.post("/api/rooms", json={"number": "102", "status": "occupied"})
    for status in ["active", "cancelled"]:
        await client.post(
            "/api/reservations",
            json={
                "guest_id": test_guest["id"],
                "room_id": test_room["id"],
                "check_in": "2024-01-01",
                "check_out": "2024-01-02",
                "status": status,
            },
        )

    response = await client.get("/api/stats")
    assert response.json() == {"guests": 1, "rooms": 2, "reservations": 2, "available_rooms": 1}


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
