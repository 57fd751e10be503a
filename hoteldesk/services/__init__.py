"""Service layer: the reservation registry and its collaborators."""

from hoteldesk.services.directory import GuestDirectory, RoomDirectory
from hoteldesk.services.overview import get_overview
from hoteldesk.services.reservation_registry import ReservationRegistry

__all__ = [
    "GuestDirectory",
    "ReservationRegistry",
    "RoomDirectory",
    "get_overview",
]
