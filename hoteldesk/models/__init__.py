"""SQLAlchemy models for Hotel Desk.

All models are imported here so that ``Base.metadata`` knows every table
before ``Database.open()`` creates the schema.
"""

from hoteldesk.models.guest import Guest
from hoteldesk.models.reservation import Reservation, ReservationStatus
from hoteldesk.models.room import Room, RoomStatus

__all__ = [
    "Guest",
    "Reservation",
    "ReservationStatus",
    "Room",
    "RoomStatus",
]
