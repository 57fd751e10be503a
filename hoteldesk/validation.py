"""Validation layer — required-field checks and type coercion before a write.

Each function is pure: it either returns the field dict to hand to the store
or raises ``ValidationError``.  No function here looks at other records, so
referential existence is never verified at this level.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from hoteldesk.errors import ValidationError
from hoteldesk.models.reservation import ReservationStatus
from hoteldesk.models.room import RoomStatus
from hoteldesk.store import id_in_range

RESERVATION_REQUIRED_MESSAGE = "Guest ID, room ID, check-in, and check-out are required"


def _coerce_date(value: date | str, field: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format") from None


def _coerce_status(value: str | None, enum_cls: type[ReservationStatus] | type[RoomStatus]) -> str:
    if isinstance(value, enum_cls):
        return value.value
    try:
        return enum_cls(value).value
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Status must be one of: {allowed}") from None


def validate_guest(
    name: str | None,
    email: str | None = None,
    phone: str | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """Check a guest record; ``name`` must be present and non-blank."""
    if not name or not name.strip():
        raise ValidationError("Name is required")
    return {"name": name, "email": email, "phone": phone, "notes": notes}


def validate_room(
    number: str | None,
    type: str | None = None,
    status: str | None = None,
    price: Decimal | float | str | None = None,
) -> dict[str, Any]:
    """Check a room record, defaulting ``status`` to ``available``."""
    if not number or not str(number).strip():
        raise ValidationError("Room number is required")

    if price is not None and price != "":
        try:
            price = Decimal(str(price))
        except InvalidOperation:
            raise ValidationError("Price must be a number") from None
        if not price.is_finite() or price < 0:
            raise ValidationError("Price must be a non-negative number")
    else:
        price = None

    return {
        "number": str(number),
        "type": type or None,
        "status": _coerce_status(status, RoomStatus) if status else RoomStatus.AVAILABLE.value,
        "price": price,
    }


def validate_reservation(
    guest_id: int | None,
    room_id: int | None,
    check_in: date | str | None,
    check_out: date | str | None,
    status: str | None = None,
) -> dict[str, Any]:
    """Check a reservation record, defaulting ``status`` to ``active``.

    All four of guest, room, check-in and check-out must be present; an empty
    string or a zero identifier counts as missing.  Dates are coerced from
    ``YYYY-MM-DD`` text.  Check-out is not required to follow check-in.
    """
    if not guest_id or not room_id or not check_in or not check_out:
        raise ValidationError(RESERVATION_REQUIRED_MESSAGE)
    for field, value in (("guest_id", guest_id), ("room_id", room_id)):
        if not id_in_range(value):
            raise ValidationError(f"{field} is out of range")

    return {
        "guest_id": guest_id,
        "room_id": room_id,
        "check_in": _coerce_date(check_in, "check_in"),
        "check_out": _coerce_date(check_out, "check_out"),
        "status": _coerce_status(status, ReservationStatus) if status else ReservationStatus.ACTIVE.value,
    }
