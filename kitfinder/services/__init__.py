"""비즈니스 로직 서비스 - export only."""

from .cache_service import SearchCache
from .catalog_service import CatalogService

__all__ = ["SearchCache", "CatalogService"]
