"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
    - Registered before the reviews catch-all so these paths are not routed to /api
"""

import logging

from fastapi import APIRouter, Request, status

from reviews_api.api.response_writer import write_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return write_response(
        status.HTTP_200_OK, {"status": "healthy", "service": "reviews-api"},
    )


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — includes database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return write_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            {"status": "not_ready", "reason": "database_unavailable"},
        )
    return write_response(
        status.HTTP_200_OK, {"status": "ready", "checks": {"database": "healthy"}},
    )
