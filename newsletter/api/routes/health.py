"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 with an empty body if the process is up (liveness)
    - GET /health never touches the database
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

from fastapi import APIRouter, Depends, Response, status

from newsletter.infrastructure.database import DatabaseSessionManager, get_db_manager

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check() -> Response:
    """Liveness probe. Returns 200 if the process is up."""
    return Response(status_code=status.HTTP_200_OK)


@router.get("/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> Response:
    """Readiness probe — includes database connectivity."""
    if not await db_manager.health_check():
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response(status_code=status.HTTP_200_OK)
