"""Pydantic v2 request/response schemas for reservation endpoints."""

from datetime import date

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ReservationIn(BaseModel):
    """Body for creating or replacing a reservation.

    Every field is optional at this level; presence, date format and status
    values are checked by ``validate_reservation`` so that the caller gets a
    single consistent message for missing fields.
    """

    guest_id: int | None = None
    room_id: int | None = None
    check_in: str | None = None
    check_out: str | None = None
    status: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ReservationResponse(BaseModel):
    """Reservation record as stored."""

    id: int
    guest_id: int
    room_id: int
    check_in: date
    check_out: date
    status: str

    model_config = ConfigDict(from_attributes=True)


class ReservationDetailResponse(ReservationResponse):
    """Reservation joined with guest and room display fields.

    The joined fields are ``None`` when the referenced guest or room does not
    exist.
    """

    guest_name: str | None = None
    guest_email: str | None = None
    room_number: str | None = None
    room_type: str | None = None
