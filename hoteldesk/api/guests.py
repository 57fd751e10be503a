"""Guests CRUD API router."""

from fastapi import APIRouter, Depends, status

from hoteldesk.api.deps import get_guest_directory
from hoteldesk.models.guest import Guest
from hoteldesk.schemas.common import ErrorResponse, MessageResponse
from hoteldesk.schemas.guest import GuestIn, GuestResponse
from hoteldesk.services import GuestDirectory

router = APIRouter(
    prefix="/api/guests",
    tags=["guests"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[GuestResponse], summary="List guests ordered by name")
async def list_guests(
    guests: GuestDirectory = Depends(get_guest_directory),
) -> list[Guest]:
    return await guests.list()


@router.get(
    "/{guest_id}",
    response_model=GuestResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a guest by ID",
)
async def get_guest(
    guest_id: int,
    guests: GuestDirectory = Depends(get_guest_directory),
) -> Guest:
    return await guests.get(guest_id)


@router.post(
    "",
    response_model=GuestResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new guest",
)
async def create_guest(
    body: GuestIn,
    guests: GuestDirectory = Depends(get_guest_directory),
) -> dict:
    return await guests.create(body.name, body.email, body.phone, body.notes)


@router.put(
    "/{guest_id}",
    response_model=GuestResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace a guest",
)
async def update_guest(
    guest_id: int,
    body: GuestIn,
    guests: GuestDirectory = Depends(get_guest_directory),
) -> dict:
    """Overwrite every field of a guest. Fields left out are cleared."""
    return await guests.update(guest_id, body.name, body.email, body.phone, body.notes)


@router.delete(
    "/{guest_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a guest",
)
async def delete_guest(
    guest_id: int,
    guests: GuestDirectory = Depends(get_guest_directory),
) -> dict:
    """Delete a guest. Reservations that reference the guest are kept."""
    await guests.delete(guest_id)
    return {"message": "Guest deleted successfully"}
