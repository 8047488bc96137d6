"""Pydantic 스키마 정의"""
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class KitSchema(BaseModel):
    """카탈로그 키트 (YAML 카탈로그 검증 및 API 응답)"""
    name: str = Field(..., min_length=1, max_length=200, description="키트 이름")
    blocks: List[str] = Field(default_factory=list, description="블록 라벨 목록")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("kit name must not be blank")
        return v.strip()

    @field_validator("blocks")
    @classmethod
    def validate_blocks(cls, v: List[str]) -> List[str]:
        """블록 라벨 공백 제거, 빈 라벨 제외"""
        return [b.strip() for b in v if b and b.strip()]


class CatalogDocument(BaseModel):
    """YAML 카탈로그 문서"""
    kits: List[KitSchema] = Field(default_factory=list)


class KitSearchRequest(BaseModel):
    """키트 검색 요청"""
    query: str = Field("", description="블록 검색어 (쉼표/공백 구분)")


class HighlightSegmentSchema(BaseModel):
    """강조 표시 구간"""
    text: str
    marked: bool = False


class BlockMatchSchema(BaseModel):
    """블록 매칭 정보"""
    block: str = Field(..., description="원본 블록 라벨")
    token: str = Field(..., description="매칭된 검색 토큰")
    score: float = Field(..., ge=0, le=1, description="유사도 (0~1)")
    exact: bool = Field(..., description="부분 문자열 정확 일치 여부")
    start: Optional[int] = Field(None, description="정규화 텍스트 기준 윈도우 시작")
    end: Optional[int] = Field(None, description="정규화 텍스트 기준 윈도우 끝")
    matched_word_index: Optional[int] = Field(None, description="매칭된 단어 위치 (None이면 전체 텍스트)")
    highlight: List[HighlightSegmentSchema] = Field(default_factory=list)


class KitResultSchema(BaseModel):
    """키트 검색 결과"""
    name: str
    kit_score: float = Field(..., ge=0)
    hits_count: int = Field(..., ge=1)
    matched_blocks: List[BlockMatchSchema]


class KitSearchResponse(BaseModel):
    """키트 검색 응답"""
    status: str = Field(..., description="no_catalog | no_query | no_matches | success | error")
    message: str = Field(..., description="응답 메시지")
    tokens: List[str] = Field(default_factory=list)
    total_kits: int = Field(0, ge=0)
    results: List[KitResultSchema] = Field(default_factory=list)
    error_code: str | None = Field(None, description="에러 코드 (error 시)")


class KitListResponse(BaseModel):
    """전체 키트 목록"""
    total_kits: int = Field(..., ge=0)
    kits: List[KitSchema]


class ReloadResponse(BaseModel):
    """카탈로그 재로딩 응답"""
    status: str
    message: str
    total_kits: int = Field(0, ge=0)
    error_code: str | None = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    kits_loaded: int = 0
