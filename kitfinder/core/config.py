"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 카탈로그
    # 상대 경로는 프로젝트 루트 기준으로 해석합니다.
    catalog_path: str = "resources/kits.txt"

    # 검색 결과 캐시 (LRU 항목 수, 0이면 비활성화)
    search_cache_size: int = 256

    # 검색어 최대 길이
    max_query_length: int = 200

    # API
    api_title: str = "Kit Finder"
    api_version: str = "1.0.0"
    api_description: str = "블록 이름(오타/복수형/부분 입력 허용)으로 해당 블록을 포함한 키트를 찾습니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("catalog_path")
    @classmethod
    def validate_catalog_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("catalog_path must not be empty")
        return v.strip()

    @field_validator("search_cache_size")
    @classmethod
    def validate_search_cache_size(cls, v: int) -> int:
        if v < 0:
            raise ValueError("search_cache_size must be >= 0")
        return v

    @field_validator("max_query_length")
    @classmethod
    def validate_max_query_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_query_length must be positive")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
