"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator and the configured record store
    """
    return {"status": "ok", "record_store": settings.record_store}
