"""커스텀 예외 정의 (Structured Exception Hierarchy)

매칭 엔진 자체는 예외를 던지지 않습니다. 아래 예외는 카탈로그 로딩과
API 입력 검증 등 엔진 바깥 계층에서만 사용됩니다.
"""
from typing import Any, Optional


# 기본 예외 클래스
class KitFinderException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 카탈로그 관련 예외
class CatalogException(KitFinderException):
    """카탈로그 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CATALOG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CATALOG_ERROR", details)


class CatalogNotFoundException(CatalogException):
    """카탈로그 파일이 없을 때"""
    def __init__(self, path: str, details: Optional[dict[str, Any]] = None):
        message = f"Catalog file not found: {path}"
        super().__init__(message, "CATALOG_NOT_FOUND", details or {"path": path})


class CatalogParseException(CatalogException):
    """카탈로그 파싱 오류"""
    def __init__(self, reason: str, line: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        location = f" (line {line})" if line is not None else ""
        message = f"Failed to parse catalog{location}: {reason}"
        super().__init__(message, "CATALOG_PARSE_ERROR", details or {"reason": reason, "line": line})


# 유효성 검증 관련 예외
class ValidationException(KitFinderException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)
