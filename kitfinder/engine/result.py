"""Search Result - Standardized Result Format

카탈로그/검색 결과 타입 정의. 모든 값은 검색 호출마다 새로 만들어지며 불변입니다.
"""

from dataclasses import dataclass
from enum import Enum

from kitfinder.utils.text.matching.types import BlockMatch, MatchSpan


@dataclass(frozen=True)
class Kit:
    """이름이 붙은 블록 목록

    Attributes:
        name: 표시용 키트 이름
        blocks: 블록 라벨 (순서 유지)
    """

    name: str
    blocks: tuple[str, ...] = ()

    def __post_init__(self):
        # list로 넘어와도 불변 튜플로 고정
        object.__setattr__(self, "blocks", tuple(self.blocks))


@dataclass(frozen=True)
class KitResult:
    """키트 하나의 검색 결과

    Attributes:
        kit: 원본 키트
        matched_blocks: 점수 내림차순 BlockMatch (블록당 최대 1개)
        kit_score: matched_blocks 점수 합
        hits_count: matched_blocks 개수
    """

    kit: Kit
    matched_blocks: tuple[BlockMatch, ...]
    kit_score: float
    hits_count: int


class SearchStatus(str, Enum):
    """검색 상태

    "검색어 없음"과 "결과 없음"은 서로 다른 안내 문구를 보여줘야 하므로 구분합니다.
    """

    NO_CATALOG = "no_catalog"  # 카탈로그가 비어 있음
    NO_QUERY = "no_query"  # 토큰 없음 (빈 검색어)
    NO_MATCHES = "no_matches"  # 검색했지만 결과 없음
    SUCCESS = "success"


@dataclass(frozen=True)
class SearchOutcome:
    """검색 결과 표준 포맷"""

    status: SearchStatus
    tokens: tuple[str, ...] = ()
    results: tuple[KitResult, ...] = ()
    total_kits: int = 0

    @property
    def is_success(self) -> bool:
        return self.status == SearchStatus.SUCCESS


__all__ = [
    "BlockMatch",
    "Kit",
    "KitResult",
    "MatchSpan",
    "SearchOutcome",
    "SearchStatus",
]
