"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from kitfinder import __version__
from kitfinder.api.routes.kit_routes import get_catalog_service
from kitfinder.schemas.kit_schema import HealthResponse
from kitfinder.services import CatalogService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(service: CatalogService = Depends(get_catalog_service)):
    """
    헬스 체크 엔드포인트

    카탈로그가 비어 있으면 degraded
    """
    kits_loaded = len(service.catalog)
    status = "ok" if kits_loaded else "degraded"

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        kits_loaded=kits_loaded,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "Kit Finder",
        "version": __version__,
        "docs": "/docs"
    }
