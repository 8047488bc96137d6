"""Kit ranking engine.

순수 동기 함수입니다. I/O, 공유 상태, 캐시 없음 (캐시는 services 계층에서 감쌉니다).
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, Optional, Sequence

from kitfinder.utils.text import match_token_to_block, threshold_for, tokenize
from kitfinder.utils.text.matching.types import BlockMatch

from .result import Kit, KitResult, SearchOutcome, SearchStatus


def name_collation_key(name: str) -> str:
    """대소문자/악센트 무시 이름 정렬 키 ("Écorce" 와 "ecorce" 가 같은 위치)"""
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def best_block_match(block: str, tokens: Sequence[str]) -> Optional[BlockMatch]:
    """블록에 대해 임계값을 통과한 토큰 중 최고 점수 매칭 (없으면 None).

    임계값은 토큰마다 자기 길이 기준으로 적용합니다. 동점이면 앞쪽 토큰이 유지됩니다.
    """
    best: Optional[BlockMatch] = None
    for token in tokens:
        match = match_token_to_block(token, block)
        if match.score < threshold_for(len(token)):
            continue
        if best is None or match.score > best.score:
            best = match
    return best


def score_kit(kit: Kit, tokens: Sequence[str]) -> Optional[KitResult]:
    """키트 하나를 채점. 매칭된 블록이 없으면 None."""
    matched: list[BlockMatch] = []
    kit_score = 0.0

    for block in kit.blocks:
        match = best_block_match(block, tokens)
        if match is None or match.score <= 0:
            continue
        matched.append(match)
        kit_score += match.score

    if not matched:
        return None

    matched.sort(key=lambda m: m.score, reverse=True)
    return KitResult(
        kit=kit,
        matched_blocks=tuple(matched),
        kit_score=kit_score,
        hits_count=len(matched),
    )


def _ranking_key(result: KitResult):
    name = result.kit.name
    return (-result.kit_score, -result.hits_count, name_collation_key(name), name)


def rank_kits(kits: Iterable[Kit], tokens: Sequence[str]) -> list[KitResult]:
    """모든 키트를 채점하고 전역 정렬.

    정렬: kit_score 내림차순 → hits_count 내림차순 → 이름 (대소문자 무시) 오름차순.
    이름이 정렬 키까지 같으면 원문 이름으로 한 번 더 비교해 전순서를 보장합니다.

    토큰이 없으면 빈 리스트를 반환합니다 ("검색 안 함" 상태는 search()가 구분).
    """
    if not tokens:
        return []

    results = []
    for kit in kits:
        result = score_kit(kit, tokens)
        if result is not None:
            results.append(result)

    results.sort(key=_ranking_key)
    return results


def search_tokens(kits: Sequence[Kit], tokens: Sequence[str]) -> SearchOutcome:
    """이미 토큰화된 검색어로 랭킹하고, 빈 상태를 구분해 반환."""
    tokens = tuple(tokens)
    total = len(kits)

    if not kits:
        return SearchOutcome(status=SearchStatus.NO_CATALOG, tokens=tokens, total_kits=0)
    if not tokens:
        return SearchOutcome(status=SearchStatus.NO_QUERY, total_kits=total)

    results = tuple(rank_kits(kits, tokens))
    status = SearchStatus.SUCCESS if results else SearchStatus.NO_MATCHES
    return SearchOutcome(status=status, tokens=tokens, results=results, total_kits=total)


def search(kits: Sequence[Kit], query: str) -> SearchOutcome:
    """검색어를 토큰화해 search_tokens 로 위임."""
    return search_tokens(kits, tokenize(query))
