"""Health Probes — /api/health (liveness) and /api/health/ready (readiness).

Invariants:
    - Liveness never touches the database
    - Readiness is 200 only when the database answers SELECT 1, otherwise 503
"""

from fastapi import APIRouter, Response, status

import store_api.infrastructure.database as database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def liveness():
    return {"status": "healthy", "service": "store-api"}


@router.get("/ready")
async def readiness(response: Response):
    """Reads the manager at call time: it is created by the lifespan."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "not_ready", "reason": "database_unavailable"}
    return {"status": "ready", "checks": {"database": "healthy"}}
