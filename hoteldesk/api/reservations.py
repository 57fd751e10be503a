"""Reservations CRUD API router.

Reservations reference guests and rooms by identifier only.  Unknown
references are accepted; reads report ``null`` guest/room display fields for
them.  ``PUT`` replaces the whole record.
"""

from fastapi import APIRouter, Depends, status

from hoteldesk.api.deps import get_registry
from hoteldesk.schemas.common import ErrorResponse, MessageResponse
from hoteldesk.schemas.reservation import (
    ReservationDetailResponse,
    ReservationIn,
    ReservationResponse,
)
from hoteldesk.services import ReservationRegistry

router = APIRouter(
    prefix="/api/reservations",
    tags=["reservations"],
    responses={500: {"model": ErrorResponse}},
)


@router.get(
    "",
    response_model=list[ReservationDetailResponse],
    summary="List reservations with guest and room details",
)
async def list_reservations(
    registry: ReservationRegistry = Depends(get_registry),
) -> list[dict]:
    """Return every reservation, most recent check-in first."""
    return await registry.list_reservations()


@router.get(
    "/{reservation_id}",
    response_model=ReservationDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a reservation with guest and room details",
)
async def get_reservation(
    reservation_id: int,
    registry: ReservationRegistry = Depends(get_registry),
) -> dict:
    return await registry.get_reservation(reservation_id)


@router.post(
    "",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new reservation",
)
async def create_reservation(
    body: ReservationIn,
    registry: ReservationRegistry = Depends(get_registry),
) -> dict:
    """Create a reservation. Status defaults to ``active``."""
    return await registry.create_reservation(
        body.guest_id,
        body.room_id,
        body.check_in,
        body.check_out,
        body.status,
    )


@router.put(
    "/{reservation_id}",
    response_model=ReservationResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace a reservation",
)
async def update_reservation(
    reservation_id: int,
    body: ReservationIn,
    registry: ReservationRegistry = Depends(get_registry),
) -> dict:
    """Overwrite every field of a reservation.

    All of guest, room, check-in and check-out must be sent again even when
    unchanged; an omitted status resets to ``active``.
    """
    return await registry.update_reservation(
        reservation_id,
        body.guest_id,
        body.room_id,
        body.check_in,
        body.check_out,
        body.status,
    )


@router.delete(
    "/{reservation_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a reservation",
)
async def delete_reservation(
    reservation_id: int,
    registry: ReservationRegistry = Depends(get_registry),
) -> dict:
    await registry.delete_reservation(reservation_id)
    return {"message": "Reservation deleted successfully"}
