"""Hotel Desk — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hoteldesk.api.errors import register_exception_handlers
from hoteldesk.api.guests import router as guests_router
from hoteldesk.api.reservations import router as reservations_router
from hoteldesk.api.rooms import router as rooms_router
from hoteldesk.api.stats import router as stats_router
from hoteldesk.config import settings
from hoteldesk.database import Database
from hoteldesk.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the storage client on startup and dispose it on shutdown."""
    database = Database(settings.async_database_url, echo=settings.debug)
    await database.open()
    app.state.database = database
    try:
        yield
    finally:
        await database.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Guests, rooms and reservations for a small hotel.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(guests_router)
app.include_router(rooms_router)
app.include_router(reservations_router)
app.include_router(stats_router)


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("hoteldesk.main:app", host=settings.host, port=settings.port, reload=settings.debug)
