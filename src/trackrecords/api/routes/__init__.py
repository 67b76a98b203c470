"""API route modules."""

from trackrecords.api.routes.health import router as health_router
from trackrecords.api.routes.records import router as records_router

__all__ = [
    "health_router",
    "records_router",
]
