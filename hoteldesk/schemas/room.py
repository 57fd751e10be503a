"""Pydantic v2 request/response schemas for room endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RoomIn(BaseModel):
    """Body for creating or replacing a room. Checked by ``validate_room``."""

    number: str | None = None
    type: str | None = None
    status: str | None = None
    price: Decimal | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RoomResponse(BaseModel):
    """Room record returned by the API."""

    id: int
    number: str
    type: str | None = None
    status: str
    price: float | None = None

    model_config = ConfigDict(from_attributes=True)
