"""검색 결과 캐시 서비스 - 캐싱 로직만 담당

프로세스 내 LRU 캐시입니다. functools.lru_cache 로 search_tokens 를 감싸며,
키는 (키트 튜플, 토큰 튜플) 이므로 카탈로그가 바뀌면 이전 항목은 더 이상 조회되지 않습니다.
"""
from functools import lru_cache
from typing import Optional, Sequence

from kitfinder.catalog import Catalog
from kitfinder.core.config import settings
from kitfinder.core.logging import logger
from kitfinder.engine import SearchOutcome, search_tokens


class SearchCache:
    """검색 결과 LRU 캐시"""

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = settings.search_cache_size if max_size is None else max_size
        self._search = lru_cache(maxsize=self.max_size)(search_tokens)

    @property
    def enabled(self) -> bool:
        return self.max_size > 0

    def search(self, catalog: Catalog, tokens: Sequence[str]) -> SearchOutcome:
        """
        캐시를 거쳐 검색 수행

        Args:
            catalog: 검색할 카탈로그
            tokens: tokenize() 결과 (순서 유지, 동점 처리에 영향)

        Returns:
            SearchOutcome (캐시 적중 시 이전과 같은 객체)
        """
        hits_before = self._search.cache_info().hits
        outcome = self._search(catalog.kits, tuple(tokens))
        if self._search.cache_info().hits > hits_before:
            logger.debug(f"Cache hit for tokens: {list(tokens)}")
        return outcome

    def clear(self) -> int:
        """전체 삭제, 삭제된 항목 수 반환"""
        count = self._search.cache_info().currsize
        self._search.cache_clear()
        if count:
            logger.info(f"Search cache cleared ({count} entries)")
        return count

    def stats(self) -> dict[str, int]:
        info = self._search.cache_info()
        return {
            "size": info.currsize,
            "max_size": self.max_size,
            "hits": info.hits,
            "misses": info.misses,
        }
