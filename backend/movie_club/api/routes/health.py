"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the store is unreachable (readiness)
    - Neither probe requires a bearer token
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from movie_club import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "movie-club-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes store connectivity."""
    manager = getattr(request.app.state, "db", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
