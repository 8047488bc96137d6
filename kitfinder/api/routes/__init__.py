"""API routes package."""

from .kit_routes import router as kit_router, get_catalog_service
from .health_routes import router as health_router

__all__ = ["health_router", "kit_router", "get_catalog_service"]
