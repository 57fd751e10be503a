"""Exception handlers translating domain errors into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hoteldesk.errors import HotelDeskError

logger = logging.getLogger(__name__)


def _format_request_error(exc: RequestValidationError) -> str:
    """Build a field-level message from the first pydantic error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def handle_domain_error(request: Request, exc: HotelDeskError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _format_request_error(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HotelDeskError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
