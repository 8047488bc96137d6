"""Kit Routes

HTTP Layer는 CatalogService로 요청을 위임하고 결과를 응답 스키마로 변환만 합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from kitfinder.core.exceptions import CatalogException, ValidationException
from kitfinder.core.logging import logger
from kitfinder.engine import KitResult, SearchOutcome, SearchStatus
from kitfinder.schemas.kit_schema import (
    BlockMatchSchema,
    HighlightSegmentSchema,
    KitListResponse,
    KitResultSchema,
    KitSchema,
    KitSearchRequest,
    KitSearchResponse,
    ReloadResponse,
)
from kitfinder.services import CatalogService
from kitfinder.utils.text import highlight_block

router = APIRouter(prefix="/api/v1", tags=["kits"])

# 빈 상태 안내 문구
STATUS_MESSAGES = {
    SearchStatus.NO_CATALOG: "No kits found. Edit kits.txt to add kits.",
    SearchStatus.NO_QUERY: "Type a block (e.g., “grass”) to find which kits include it.",
    SearchStatus.NO_MATCHES: "No kits match that (try fewer letters or another spelling).",
}

# 싱글톤 서비스
_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """CatalogService 싱글톤"""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
    return _catalog_service


def _to_result_schema(result: KitResult) -> KitResultSchema:
    blocks = [
        BlockMatchSchema(
            block=m.block,
            token=m.token,
            score=m.score,
            exact=m.span.exact,
            start=m.span.start,
            end=m.span.end,
            matched_word_index=m.matched_word_index,
            highlight=[
                HighlightSegmentSchema(text=s.text, marked=s.marked)
                for s in highlight_block(m)
            ],
        )
        for m in result.matched_blocks
    ]
    return KitResultSchema(
        name=result.kit.name,
        kit_score=result.kit_score,
        hits_count=result.hits_count,
        matched_blocks=blocks,
    )


def to_search_response(outcome: SearchOutcome) -> KitSearchResponse:
    """SearchOutcome → KitSearchResponse"""
    if outcome.status == SearchStatus.SUCCESS:
        count = len(outcome.results)
        message = f"{count} matching kit{'s' if count != 1 else ''}"
    else:
        message = STATUS_MESSAGES[outcome.status]

    return KitSearchResponse(
        status=outcome.status.value,
        message=message,
        tokens=list(outcome.tokens),
        total_kits=outcome.total_kits,
        results=[_to_result_schema(r) for r in outcome.results],
    )


@router.get("/kits", response_model=KitListResponse)
def list_kits(service: CatalogService = Depends(get_catalog_service)):
    """로딩된 전체 키트 (이름순)"""
    kits = service.catalog.kits
    return KitListResponse(
        total_kits=len(kits),
        kits=[KitSchema(name=k.name, blocks=list(k.blocks)) for k in kits],
    )


@router.post("/kits/search", response_model=KitSearchResponse)
def search_kits(
    request: KitSearchRequest,
    service: CatalogService = Depends(get_catalog_service),
):
    """키트 검색 API

    Flow:
        1. 검색어 검증
        2. 토큰화 → 랭킹 (캐시 경유)
        3. 결과 + 강조 구간을 응답으로 변환
    """
    try:
        outcome = service.search(request.query)
    except ValidationException as e:
        logger.warning(f"[API] Input validation failed: {e}")
        return KitSearchResponse(
            status="error",
            message=f"Invalid query: {e.details.get('reason', e.message)}",
            error_code=e.error_code,
        )

    return to_search_response(outcome)


@router.post("/kits/reload", response_model=ReloadResponse)
def reload_kits(service: CatalogService = Depends(get_catalog_service)):
    """카탈로그 파일 재로딩"""
    try:
        catalog = service.reload()
    except CatalogException as e:
        return ReloadResponse(
            status="error",
            message=f"Failed to load {service.catalog_path}",
            total_kits=len(service.catalog),
            error_code=e.error_code,
        )

    return ReloadResponse(
        status="success",
        message=f"{len(catalog)} kits loaded.",
        total_kits=len(catalog),
    )
