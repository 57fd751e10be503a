"""Error taxonomy shared by the stores, the registry and the API layer.

Each error carries a human-readable message that is returned to the caller
verbatim as ``{"error": message}``.
"""


class HotelDeskError(Exception):
    """Base class for all domain errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HotelDeskError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFound(HotelDeskError):
    """An identifier does not resolve to an existing record."""

    status_code = 404


class StorageFault(HotelDeskError):
    """The underlying persistence operation failed.

    Only an opaque message reaches the caller; the cause is logged.
    """

    status_code = 500
