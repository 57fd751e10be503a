"""Pydantic v2 request/response schemas for guest endpoints.

The free-form notes field travels as ``custom_fields`` on the wire, which is
the name the browser UI sends and reads; ``notes`` is also accepted on input.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class GuestIn(BaseModel):
    """Body for creating or replacing a guest.

    ``name`` is optional here so that a missing name is reported by the
    validation layer with its own message.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = Field(None, validation_alias=AliasChoices("custom_fields", "notes"))


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class GuestResponse(BaseModel):
    """Guest record returned by the API."""

    id: int
    name: str
    email: str | None = None
    phone: str | None = None
    notes: str | None = Field(None, serialization_alias="custom_fields")

    model_config = ConfigDict(from_attributes=True)
