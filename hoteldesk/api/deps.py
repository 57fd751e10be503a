"""Shared API dependencies — single import point for all routers.

The storage client lives on ``app.state`` (set up by the lifespan handler);
every service is built on top of it per request::

    from hoteldesk.api.deps import get_registry
"""

from fastapi import Depends, Request

from hoteldesk.database import Database
from hoteldesk.services import GuestDirectory, ReservationRegistry, RoomDirectory


def get_database(request: Request) -> Database:
    """Return the process-wide storage client opened at startup."""
    return request.app.state.database


def get_registry(database: Database = Depends(get_database)) -> ReservationRegistry:
    return ReservationRegistry(database)


def get_guest_directory(database: Database = Depends(get_database)) -> GuestDirectory:
    return GuestDirectory(database)


def get_room_directory(database: Database = Depends(get_database)) -> RoomDirectory:
    return RoomDirectory(database)


__all__ = [
    "get_database",
    "get_guest_directory",
    "get_registry",
    "get_room_directory",
]
