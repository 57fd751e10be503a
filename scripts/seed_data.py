"""Seed the database with a handful of guests, rooms and reservations.

Existing rows are left alone; running the script twice adds a second copy.

Run from the project root:
    python -m scripts.seed_data
"""

import asyncio
import logging
from datetime import date, timedelta
from decimal import Decimal

from hoteldesk.config import settings
from hoteldesk.database import Database
from hoteldesk.services import GuestDirectory, ReservationRegistry, RoomDirectory

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

GUESTS = [
    {"name": "Alice Moreau", "email": "alice@example.com", "phone": "+33 6 12 34 56 78"},
    {"name": "Bruno Keller", "email": "bruno.keller@example.com", "phone": None, "notes": "Late arrival"},
    {"name": "Chiara Rossi", "email": None, "phone": "+39 333 123 4567"},
]

ROOMS = [
    {"number": "101", "type": "single", "price": Decimal("80.00")},
    {"number": "102", "type": "double", "price": Decimal("110.00")},
    {"number": "201", "type": "suite", "price": Decimal("220.00")},
    {"number": "202", "type": "deluxe", "status": "maintenance", "price": Decimal("180.00")},
]

# (guest index, room index, days from today, nights, status)
RESERVATIONS = [
    (0, 0, -10, 3, "completed"),
    (1, 1, 2, 4, "active"),
    (2, 2, 7, 2, "active"),
    (0, 1, 20, 5, "cancelled"),
]


async def seed() -> None:
    database = Database(settings.async_database_url, echo=settings.debug)
    await database.open()
    try:
        guests = GuestDirectory(database)
        rooms = RoomDirectory(database)
        registry = ReservationRegistry(database)

        guest_ids = [(await guests.create(**guest))["id"] for guest in GUESTS]
        room_ids = [(await rooms.create(**room))["id"] for room in ROOMS]

        today = date.today()
        for guest_idx, room_idx, offset, nights, status in RESERVATIONS:
            check_in = today + timedelta(days=offset)
            await registry.create_reservation(
                guest_ids[guest_idx],
                room_ids[room_idx],
                check_in,
                check_in + timedelta(days=nights),
                status,
            )

        logger.info(
            "Seeded %d guests, %d rooms, %d reservations",
            len(GUESTS),
            len(ROOMS),
            len(RESERVATIONS),
        )
    finally:
        await database.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(seed())
