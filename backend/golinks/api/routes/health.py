"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
    - Readiness reports cache size so a cold cache is visible to operators
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import golinks.infrastructure.database as database
from golinks.api.dependencies import get_cache
from golinks.core.resolution_cache import ResolutionCache

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "golinks",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(cache: ResolutionCache = Depends(get_cache)):
    """Readiness probe, includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "cached_links": len(cache),
    }
