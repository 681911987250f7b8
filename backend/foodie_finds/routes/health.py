"""
Foodie Finds API: Health Check Route
======================================

What:  Health check endpoint for monitoring probes.
How:   Pings the storage handle with SELECT 1 and reports uptime.

Status levels:
    - healthy:   Database answered the ping
    - unhealthy: Handle never opened, or the ping failed
"""

import logging
import time

from fastapi import APIRouter, Depends

from foodie_finds import __version__
from foodie_finds.database import Database, get_database
from foodie_finds.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(db: Database = Depends(get_database)) -> HealthResponse:
    if await db.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
