"""입력 보안 검증"""

import unicodedata

from kitfinder.core.config import settings
from kitfinder.core.exceptions import InvalidQueryException
from kitfinder.core.logging import logger, sanitize_for_log


class SecurityValidator:
    """입력 보안 검증"""

    @staticmethod
    def validate_query(query: str) -> bool:
        """검색어 검증

        빈 검색어는 허용합니다 ("검색 안 함" 상태로 처리).

        Args:
            query: 검색어

        Returns:
            유효성 여부

        Raises:
            InvalidQueryException: 너무 길거나 제어 문자가 포함된 경우
        """
        if not query:
            return True

        if len(query) > settings.max_query_length:
            raise InvalidQueryException(
                f"query must be at most {settings.max_query_length} characters"
            )

        # 제어 문자 (개행, 탭, NUL 등)
        for char in query:
            if unicodedata.category(char) == "Cc":
                logger.warning(
                    f"Control character in query: {sanitize_for_log(repr(char))}"
                )
                raise InvalidQueryException("query contains control characters")

        return True
