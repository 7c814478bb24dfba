"""
Game Inventory — Health Check Route
====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the store and reports the result with version and uptime.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database answered (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from game_inventory import __version__
from game_inventory.dependencies import get_store
from game_inventory.schemas.common import HealthResponse
from game_inventory.store.base import InventoryStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
)
async def health_check(store: InventoryStore = Depends(get_store)):
    """Ping the database and return aggregate status."""
    connected = await store.ping()
    if not connected:
        logger.warning("Health check: database unreachable")

    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(status_code=200 if connected else 503, content=body.model_dump())
