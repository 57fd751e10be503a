"""Tests for reservation CRUD endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy import text

from hoteldesk.database import Database

pytestmark = pytest.mark.asyncio


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _payload(guest_id: int = 1, room_id: int = 1, **overrides) -> dict:
    payload = {
        "guest_id": guest_id,
        "room_id": room_id,
        "check_in": "2024-03-01",
        "check_out": "2024-03-05",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# POST /api/reservations
# ---------------------------------------------------------------------------


class TestCreateReservation:
    """Tests for creating reservations."""

    async def test_create_success(self, client: AsyncClient, test_guest: dict, test_room: dict) -> None:
        response = await client.post("/api/reservations", json=_payload(test_guest["id"], test_room["id"]))
        assert response.status_code == 201
        data = response.json()
        assert data == {
            "id": 1,
            "guest_id": test_guest["id"],
            "room_id": test_room["id"],
            "check_in": "2024-03-01",
            "check_out": "2024-03-05",
            "status": "active",
        }

    async def test_create_with_status(self, client: AsyncClient) -> None:
        response = await client.post("/api/reservations", json=_payload(status="completed"))
        assert response.status_code == 201
        assert response.json()["status"] == "completed"

    @pytest.mark.parametrize("missing", ["guest_id", "room_id", "check_in", "check_out"])
    async def test_create_missing_field(self, client: AsyncClient, missing: str) -> None:
        payload = _payload()
        del payload[missing]

        response = await client.post("/api/reservations", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "Guest ID, room ID, check-in, and check-out are required"

    async def test_create_empty_check_out(self, client: AsyncClient) -> None:
        response = await client.post("/api/reservations", json=_payload(check_out=""))
        assert response.status_code == 400

        listed = await client.get("/api/reservations")
        assert listed.json() == []

    async def test_create_malformed_date(self, client: AsyncClient) -> None:
        response = await client.post("/api/reservations", json=_payload(check_in="03/01/2024"))
        assert response.status_code == 400
        assert "check_in" in response.json()["error"]

    async def test_create_invalid_status(self, client: AsyncClient) -> None:
        response = await client.post("/api/reservations", json=_payload(status="confirmed"))
        assert response.status_code == 400
        assert "Status must be one of" in response.json()["error"]

    async def test_create_non_integer_guest(self, client: AsyncClient) -> None:
        response = await client.post("/api/reservations", json=_payload(guest_id="not-a-number"))
        assert response.status_code == 400
        assert "guest_id" in response.json()["error"]

    async def test_create_dangling_room(self, client: AsyncClient, test_guest: dict) -> None:
        """A room that does not exist is accepted; joined fields come back null."""
        response = await client.post("/api/reservations", json=_payload(test_guest["id"], 999))
        assert response.status_code == 201

        detail = await client.get(f"/api/reservations/{response.json()['id']}")
        assert detail.status_code == 200
        data = detail.json()
        assert data["room_id"] == 999
        assert data["room_number"] is None
        assert data["room_type"] is None
        assert data["guest_name"] == "Alice"


# ---------------------------------------------------------------------------
# GET /api/reservations
# ---------------------------------------------------------------------------


class TestListReservations:
    async def test_list_joined_and_ordered(self, client: AsyncClient, test_guest: dict, test_room: dict) -> None:
        for check_in in ["2024-01-05", "2024-02-01", "2024-01-20"]:
            resp = await client.post(
                "/api/reservations",
                json=_payload(test_guest["id"], test_room["id"], check_in=check_in, check_out="2024-03-01"),
            )
            assert resp.status_code == 201

        response = await client.get("/api/reservations")
        assert response.status_code == 200
        data = response.json()
        assert [item["check_in"] for item in data] == ["2024-02-01", "2024-01-20", "2024-01-05"]
        assert all(item["guest_name"] == "Alice" for item in data)
        assert all(item["guest_email"] == "alice@example.com" for item in data)
        assert all(item["room_number"] == "101" for item in data)
        assert all(item["room_type"] == "double" for item in data)


# ---------------------------------------------------------------------------
# GET /api/reservations/{id}
# ---------------------------------------------------------------------------


class TestGetReservation:
    async def test_get_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/api/reservations/12345")
        assert response.status_code == 404
        assert response.json() == {"error": "Reservation not found"}


# ---------------------------------------------------------------------------
# PUT /api/reservations/{id}
# ---------------------------------------------------------------------------


class TestUpdateReservation:
    async def test_cancel_scenario(self, client: AsyncClient, test_guest: dict, test_room: dict) -> None:
        """Alice books room 101, then the reservation is cancelled."""
        assert test_guest["id"] == 1
        assert test_room["id"] == 1
        assert test_room["status"] == "available"

        created = await client.post("/api/reservations", json=_payload(1, 1))
        assert created.status_code == 201
        assert created.json()["status"] == "active"
        reservation_id = created.json()["id"]

        updated = await client.put(f"/api/reservations/{reservation_id}", json=_payload(1, 1, status="cancelled"))
        assert updated.status_code == 200
        assert updated.json()["status"] == "cancelled"

        fetched = await client.get(f"/api/reservations/{reservation_id}")
        assert fetched.status_code == 200
        assert fetched.json()["status"] == "cancelled"

    async def test_update_requires_full_record(self, client: AsyncClient) -> None:
        created = await client.post("/api/reservations", json=_payload())
        reservation_id = created.json()["id"]

        response = await client.put(f"/api/reservations/{reservation_id}", json={"status": "completed"})
        assert response.status_code == 400

        fetched = await client.get(f"/api/reservations/{reservation_id}")
        assert fetched.json()["status"] == "active"

    async def test_update_not_found(self, client: AsyncClient) -> None:
        response = await client.put("/api/reservations/777", json=_payload())
        assert response.status_code == 404
        assert response.json()["error"] == "Reservation not found"

    async def test_update_validation_before_lookup(self, client: AsyncClient) -> None:
        response = await client.put("/api/reservations/777", json={})
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# DELETE /api/reservations/{id}
# ---------------------------------------------------------------------------


class TestDeleteReservation:
    async def test_delete_then_delete_again(self, client: AsyncClient) -> None:
        created = await client.post("/api/reservations", json=_payload())
        reservation_id = created.json()["id"]

        first = await client.delete(f"/api/reservations/{reservation_id}")
        assert first.status_code == 200
        assert first.json() == {"message": "Reservation deleted successfully"}

        second = await client.delete(f"/api/reservations/{reservation_id}")
        assert second.status_code == 404

        fetched = await client.get(f"/api/reservations/{reservation_id}")
        assert fetched.status_code == 404

    async def test_delete_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.delete("/api/reservations/abc")
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# Identifiers beyond the 64-bit integer range
# ---------------------------------------------------------------------------


class TestOversizedIdentifiers:
    HUGE = 2**70

    async def test_get_update_delete_are_not_found(self, client: AsyncClient) -> None:
        url = f"/api/reservations/{self.HUGE}"

        assert (await client.get(url)).json() == {"error": "Reservation not found"}
        assert (await client.get(url)).status_code == 404
        assert (await client.put(url, json=_payload())).status_code == 404
        assert (await client.delete(url)).status_code == 404

    @pytest.mark.parametrize("field", ["guest_id", "room_id"])
    async def test_create_with_oversized_reference(self, client: AsyncClient, field: str) -> None:
        response = await client.post("/api/reservations", json=_payload(**{field: self.HUGE}))
        assert response.status_code == 400
        assert response.json() == {"error": f"{field} is out of range"}

        assert (await client.get("/api/reservations")).json() == []

    async def test_guest_and_room_lookups(self, client: AsyncClient) -> None:
        assert (await client.get(f"/api/guests/{self.HUGE}")).status_code == 404
        assert (await client.delete(f"/api/rooms/{self.HUGE}")).status_code == 404
        assert (await client.put(f"/api/rooms/{self.HUGE}", json={"number": "1"})).status_code == 404


# ---------------------------------------------------------------------------
# Storage failures
# ---------------------------------------------------------------------------


class TestStorageFailure:
    async def test_list_returns_opaque_500(self, client: AsyncClient, database: Database) -> None:
        async with database.session() as session:
            await session.execute(text("DROP TABLE reservations"))

        response = await client.get("/api/reservations")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch reservations"}

    async def test_create_returns_opaque_500(self, client: AsyncClient, database: Database) -> None:
        async with database.session() as session:
            await session.execute(text("DROP TABLE reservations"))

        response = await client.post("/api/reservations", json=_payload())
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create reservation"}
