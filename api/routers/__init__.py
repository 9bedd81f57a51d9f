"""
Router package for the Records API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- records: Record creation and listing
"""

from api.routers.health import router as health_router
from api.routers.records import router as records_router

__all__ = [
    "health_router",
    "records_router",
]
