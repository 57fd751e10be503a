"""Rooms CRUD API router."""

from fastapi import APIRouter, Depends, status

from hoteldesk.api.deps import get_room_directory
from hoteldesk.models.room import Room
from hoteldesk.schemas.common import ErrorResponse, MessageResponse
from hoteldesk.schemas.room import RoomIn, RoomResponse
from hoteldesk.services import RoomDirectory

router = APIRouter(
    prefix="/api/rooms",
    tags=["rooms"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[RoomResponse], summary="List rooms ordered by number")
async def list_rooms(
    rooms: RoomDirectory = Depends(get_room_directory),
) -> list[Room]:
    return await rooms.list()


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a room by ID",
)
async def get_room(
    room_id: int,
    rooms: RoomDirectory = Depends(get_room_directory),
) -> Room:
    return await rooms.get(room_id)


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new room",
)
async def create_room(
    body: RoomIn,
    rooms: RoomDirectory = Depends(get_room_directory),
) -> dict:
    """Create a room. Status defaults to ``available``."""
    return await rooms.create(body.number, body.type, body.status, body.price)


@router.put(
    "/{room_id}",
    response_model=RoomResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace a room",
)
async def update_room(
    room_id: int,
    body: RoomIn,
    rooms: RoomDirectory = Depends(get_room_directory),
) -> dict:
    return await rooms.update(room_id, body.number, body.type, body.status, body.price)


@router.delete(
    "/{room_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a room",
)
async def delete_room(
    room_id: int,
    rooms: RoomDirectory = Depends(get_room_directory),
) -> dict:
    """Delete a room. Reservations that reference the room are kept."""
    await rooms.delete(room_id)
    return {"message": "Room deleted successfully"}
