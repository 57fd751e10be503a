"""Pydantic v2 schemas shared across endpoints."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx produced by the API."""

    error: str


class OverviewResponse(BaseModel):
    """Dashboard counters."""

    guests: int
    rooms: int
    reservations: int
    available_rooms: int


class HealthResponse(BaseModel):
    status: str
    service: str
