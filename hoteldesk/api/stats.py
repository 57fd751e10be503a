"""Dashboard overview API router."""

from fastapi import APIRouter, Depends

from hoteldesk.api.deps import get_database
from hoteldesk.database import Database
from hoteldesk.schemas.common import ErrorResponse, OverviewResponse
from hoteldesk.services import get_overview

router = APIRouter(prefix="/api/stats", tags=["stats"], responses={500: {"model": ErrorResponse}})


@router.get("", response_model=OverviewResponse, summary="Counts for the dashboard")
async def read_overview(database: Database = Depends(get_database)) -> dict:
    return await get_overview(database)
