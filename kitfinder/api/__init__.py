"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, kit_router, get_catalog_service

__all__ = ["health_router", "kit_router", "get_catalog_service"]
