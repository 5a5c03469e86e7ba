"""
NoteVault Backend — Health Check Route
======================================

What:  Liveness / readiness probe.
How:   `SELECT 1` on a pooled connection; 200 when it succeeds, 503 otherwise.
"""

import logging
import time

from fastapi import APIRouter, Response, status
from sqlalchemy import text

from notevault import __version__
from notevault.database import engine
from notevault.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

STARTED_AT = time.monotonic()


async def database_reachable() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        return False
    return True


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    db_ok = await database_reachable()
    if not db_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        version=__version__,
        database="connected" if db_ok else "disconnected",
        uptime_seconds=round(time.monotonic() - STARTED_AT, 2),
    )
