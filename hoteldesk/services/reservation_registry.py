"""Reservation registry — the reservation lifecycle over guests and rooms.

Composes the guest, room and reservation stores.  References to guests and
rooms are stored as given: a reference that does not resolve is logged as a
warning and the write goes ahead, and joined reads report ``None`` for the
guest/room display fields.
"""

import logging
from datetime import date
from typing import Any

from sqlalchemy import Select, select

from hoteldesk.database import Database
from hoteldesk.errors import NotFound
from hoteldesk.models.guest import Guest
from hoteldesk.models.reservation import Reservation
from hoteldesk.models.room import Room
from hoteldesk.store import EntityStore, id_in_range, storage_guard
from hoteldesk.validation import validate_reservation

logger = logging.getLogger(__name__)

RESERVATION_FIELDS = ("id", "guest_id", "room_id", "check_in", "check_out", "status")


def _joined_query() -> Select:
    """Reservations LEFT OUTER JOINed with their guest and room display fields."""
    return (
        select(
            Reservation,
            Guest.name.label("guest_name"),
            Guest.email.label("guest_email"),
            Room.number.label("room_number"),
            Room.type.label("room_type"),
        )
        .outerjoin(Guest, Reservation.guest_id == Guest.id)
        .outerjoin(Room, Reservation.room_id == Room.id)
    )


def _joined_view(row: Any) -> dict[str, Any]:
    reservation = row.Reservation
    view = {field: getattr(reservation, field) for field in RESERVATION_FIELDS}
    view.update(
        guest_name=row.guest_name,
        guest_email=row.guest_email,
        room_number=row.room_number,
        room_type=row.room_type,
    )
    return view


class ReservationRegistry:
    """Create, replace, delete and read reservations.

    Status values are never checked against the previous value: any of
    ``active``, ``completed`` and ``cancelled`` may follow any other.
    """

    def __init__(self, database: Database) -> None:
        self.database = database
        self.guests = EntityStore(database, Guest, "guest")
        self.rooms = EntityStore(database, Room, "room")
        self.reservations = EntityStore(database, Reservation, "reservation")

    async def _warn_on_dangling(self, guest_id: int, room_id: int) -> None:
        """Log references that do not resolve. Never blocks the write."""
        if await self.guests.get(guest_id) is None:
            logger.warning("Reservation references unknown guest %s", guest_id)
        if await self.rooms.get(room_id) is None:
            logger.warning("Reservation references unknown room %s", room_id)

    async def create_reservation(
        self,
        guest_id: int | None,
        room_id: int | None,
        check_in: date | str | None,
        check_out: date | str | None,
        status: str | None = None,
    ) -> dict[str, Any]:
        """Validate and insert a reservation; return the stored record."""
        values = validate_reservation(guest_id, room_id, check_in, check_out, status)
        await self._warn_on_dangling(values["guest_id"], values["room_id"])

        reservation_id = await self.reservations.insert(values)
        return {"id": reservation_id, **values}

    async def update_reservation(
        self,
        reservation_id: int,
        guest_id: int | None,
        room_id: int | None,
        check_in: date | str | None,
        check_out: date | str | None,
        status: str | None = None,
    ) -> dict[str, Any]:
        """Replace every field of an existing reservation.

        There is no partial update: callers resend unchanged fields, and an
        omitted status resets to ``active``.

        Raises:
            ValidationError: a required field is missing or malformed.
            NotFound: no reservation has this identifier.
        """
        values = validate_reservation(guest_id, room_id, check_in, check_out, status)

        if not await self.reservations.update(reservation_id, values):
            raise NotFound("Reservation not found")
        await self._warn_on_dangling(values["guest_id"], values["room_id"])
        return {"id": reservation_id, **values}

    async def delete_reservation(self, reservation_id: int) -> None:
        if not await self.reservations.delete(reservation_id):
            raise NotFound("Reservation not found")

    async def get_reservation(self, reservation_id: int) -> dict[str, Any]:
        """Return the joined view of one reservation, or raise ``NotFound``."""
        if not id_in_range(reservation_id):
            raise NotFound("Reservation not found")

        async with storage_guard(self.database, "Failed to fetch reservation") as session:
            result = await session.execute(_joined_query().where(Reservation.id == reservation_id))
            row = result.one_or_none()

        if row is None:
            raise NotFound("Reservation not found")
        return _joined_view(row)

    async def list_reservations(self) -> list[dict[str, Any]]:
        """Return joined views of every reservation, latest check-in first."""
        async with storage_guard(self.database, "Failed to fetch reservations") as session:
            result = await session.execute(
                _joined_query().order_by(Reservation.check_in.desc(), Reservation.id.desc())
            )
            rows = result.all()
        return [_joined_view(row) for row in rows]
