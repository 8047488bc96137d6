"""카탈로그 서비스 - 카탈로그 보관/재로딩 및 캐시 경유 검색"""
import threading
import time
from typing import Optional

from kitfinder.catalog import Catalog, EMPTY_CATALOG, load_catalog
from kitfinder.core.config import settings
from kitfinder.core.exceptions import CatalogException
from kitfinder.core.logging import logger, sanitize_for_log
from kitfinder.core.security import SecurityValidator
from kitfinder.engine import SearchOutcome
from kitfinder.utils.text import tokenize

from .cache_service import SearchCache


class CatalogService:
    """현재 카탈로그를 보관하고 검색을 수행하는 서비스"""

    def __init__(self, catalog_path: Optional[str] = None, cache: Optional[SearchCache] = None):
        self.catalog_path = catalog_path or settings.catalog_path
        self.cache = cache if cache is not None else SearchCache()
        self._catalog: Catalog = EMPTY_CATALOG
        self._lock = threading.Lock()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def reload(self) -> Catalog:
        """
        카탈로그 파일을 다시 읽어 교체

        실패하면 기존 카탈로그를 유지하고 예외를 그대로 전달합니다.

        Raises:
            CatalogException: 파일 없음 / 파싱 실패
        """
        try:
            catalog = load_catalog(self.catalog_path)
        except CatalogException as e:
            logger.error(f"Catalog reload failed: {e}")
            raise

        with self._lock:
            previous = self._catalog
            self._catalog = catalog

        if previous.fingerprint != catalog.fingerprint:
            self.cache.clear()
        logger.info(f"{len(catalog)} kits loaded.")
        return catalog

    def use_catalog(self, catalog: Catalog) -> None:
        """이미 만들어진 카탈로그로 교체 (테스트/임베딩용)"""
        with self._lock:
            self._catalog = catalog
        self.cache.clear()

    def search(self, query: str) -> SearchOutcome:
        """
        검색어 검증 → 토큰화 → 캐시 경유 랭킹

        Raises:
            InvalidQueryException: 검색어 검증 실패
        """
        SecurityValidator.validate_query(query)

        catalog = self._catalog
        tokens = tuple(tokenize(query))

        started = time.perf_counter()
        outcome = self.cache.search(catalog, tokens)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            f"[search] query='{sanitize_for_log(query)}' tokens={len(tokens)} "
            f"status={outcome.status.value} matches={len(outcome.results)} elapsed={elapsed_ms:.1f}ms"
        )
        return outcome
