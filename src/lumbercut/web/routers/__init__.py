"""API routers for the REST API."""

from lumbercut.web.routers.plan import router as plan_router
from lumbercut.web.routers.validate import router as validate_router

__all__ = [
    "plan_router",
    "validate_router",
]
