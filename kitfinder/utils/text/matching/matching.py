"""Block matching helpers."""

from __future__ import annotations

from ..core.cleaning import canonicalize
from .similarity import best_window_similarity
from .types import BlockMatch, NO_MATCH


def match_token_to_block(token: str, block: str) -> BlockMatch:
    """블록 전체 텍스트와 각 단어에 대해 토큰을 비교하고 최고 점수를 반환.

    전체 텍스트를 먼저 평가하고 strict '>' 로만 갱신하므로
    동점이면 전체 텍스트(그다음 앞쪽 단어)가 이깁니다.
    """
    best = BlockMatch(block=block, token=token, span=NO_MATCH)

    whole = best_window_similarity(block, token)
    if whole.score > best.score:
        best = BlockMatch(block=block, token=token, span=whole)

    words = canonicalize(block).split(" ")
    for index, word in enumerate(words):
        span = best_window_similarity(word, token)
        if span.score > best.score:
            best = BlockMatch(block=block, token=token, span=span, matched_word_index=index)

    return best
