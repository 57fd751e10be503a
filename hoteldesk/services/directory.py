"""Guest and room directories — single-entity CRUD used by the API.

Deleting a guest or room never touches reservations that reference it.
"""

from typing import Any

from hoteldesk.database import Database
from hoteldesk.errors import NotFound
from hoteldesk.models.guest import Guest
from hoteldesk.models.room import Room
from hoteldesk.store import EntityStore
from hoteldesk.validation import validate_guest, validate_room


class GuestDirectory:
    def __init__(self, database: Database) -> None:
        self.store = EntityStore(database, Guest, "guest")

    async def list(self) -> list[Guest]:
        return await self.store.list(Guest.name, Guest.id)

    async def get(self, guest_id: int) -> Guest:
        guest = await self.store.get(guest_id)
        if guest is None:
            raise NotFound("Guest not found")
        return guest

    async def create(
        self,
        name: str | None,
        email: str | None = None,
        phone: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        values = validate_guest(name, email, phone, notes)
        guest_id = await self.store.insert(values)
        return {"id": guest_id, **values}

    async def update(
        self,
        guest_id: int,
        name: str | None,
        email: str | None = None,
        phone: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        """Replace every field of the guest; omitted optional fields are cleared."""
        values = validate_guest(name, email, phone, notes)
        if not await self.store.update(guest_id, values):
            raise NotFound("Guest not found")
        return {"id": guest_id, **values}

    async def delete(self, guest_id: int) -> None:
        if not await self.store.delete(guest_id):
            raise NotFound("Guest not found")


class RoomDirectory:
    def __init__(self, database: Database) -> None:
        self.store = EntityStore(database, Room, "room")

    async def list(self) -> list[Room]:
        return await self.store.list(Room.number, Room.id)

    async def get(self, room_id: int) -> Room:
        room = await self.store.get(room_id)
        if room is None:
            raise NotFound("Room not found")
        return room

    async def create(
        self,
        number: str | None,
        type: str | None = None,
        status: str | None = None,
        price: Any = None,
    ) -> dict[str, Any]:
        values = validate_room(number, type, status, price)
        room_id = await self.store.insert(values)
        return {"id": room_id, **values}

    async def update(
        self,
        room_id: int,
        number: str | None,
        type: str | None = None,
        status: str | None = None,
        price: Any = None,
    ) -> dict[str, Any]:
        """Replace every field of the room; an omitted status resets to ``available``."""
        values = validate_room(number, type, status, price)
        if not await self.store.update(room_id, values):
            raise NotFound("Room not found")
        return {"id": room_id, **values}

    async def delete(self, room_id: int) -> None:
        if not await self.store.delete(room_id):
            raise NotFound("Room not found")
