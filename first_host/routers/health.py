"""Health check endpoints.

Used by container orchestrators to determine application health, readiness,
and liveness.

- /health: General health check (no auth required)
- /health/ready: Readiness probe (can accept traffic?)
- /health/live: Liveness probe (is the app running?)
"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health")
async def health_check():
    """Health check endpoint (no authentication required)."""
    return {
        "status": "healthy",
        "service": "First Host Address API",
        "version": "1.0.0",
    }


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness check: the resolver has been constructed."""
    if getattr(request.app.state, "resolver", None) is None:
        return {"status": "not_ready"}
    return {"status": "ready"}


@router.get("/health/live")
async def liveness_check():
    """Liveness check for container orchestrators."""
    return {"status": "alive"}
