"""Overview counters for the dashboard."""

from hoteldesk.database import Database
from hoteldesk.models.guest import Guest
from hoteldesk.models.reservation import Reservation
from hoteldesk.models.room import Room, RoomStatus
from hoteldesk.store import EntityStore


async def get_overview(database: Database) -> dict[str, int]:
    """Count guests, rooms, reservations and rooms currently available.

    ``reservations`` counts every reservation regardless of status.
    """
    rooms = EntityStore(database, Room, "room")
    return {
        "guests": await EntityStore(database, Guest, "guest").count(),
        "rooms": await rooms.count(),
        "reservations": await EntityStore(database, Reservation, "reservation").count(),
        "available_rooms": await rooms.count(Room.status == RoomStatus.AVAILABLE.value),
    }
