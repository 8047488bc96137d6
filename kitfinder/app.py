"""FastAPI 앱 팩토리"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from kitfinder.core.config import settings
from kitfinder.core.exceptions import CatalogException
from kitfinder.core.logging import logger
from kitfinder.api import health_router, kit_router, get_catalog_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    try:
        get_catalog_service().reload()
    except CatalogException as e:
        # 카탈로그 없이도 기동하고 /kits/reload 로 복구
        logger.error(f"Initial catalog load failed: {e}")
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(kit_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
