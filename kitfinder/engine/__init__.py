"""Engine Layer - 퍼지 매칭 기반 키트 랭킹

Public API:
- rank_kits: (kits, tokens) -> list[KitResult]
- search_tokens: (kits, tokens) -> SearchOutcome
- search: (kits, query) -> SearchOutcome
"""

from .result import BlockMatch, Kit, KitResult, MatchSpan, SearchOutcome, SearchStatus
from .ranking import (
    best_block_match,
    name_collation_key,
    rank_kits,
    score_kit,
    search,
    search_tokens,
)

__all__ = [
    "BlockMatch",
    "Kit",
    "KitResult",
    "MatchSpan",
    "SearchOutcome",
    "SearchStatus",
    "best_block_match",
    "name_collation_key",
    "rank_kits",
    "score_kit",
    "search",
    "search_tokens",
]
