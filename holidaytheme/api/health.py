"""
Health check endpoint - used by load balancers and Docker healthcheck.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


@router.get("/health")
async def health_check(request: Request):
    """Liveness check, plus whether the midnight refresher is armed."""
    refresher = getattr(request.app.state, "holiday_refresher", None)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION,
        "midnight_refresh_pending": bool(refresher and refresher.pending),
    }
