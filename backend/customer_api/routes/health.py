"""
Customer API — Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs `SELECT 1` against the database and reports the result.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (every customer route would fail)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from customer_api import __version__
from customer_api.database import engine
from customer_api.schemas.customer import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Probe the database and return aggregate status and uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
