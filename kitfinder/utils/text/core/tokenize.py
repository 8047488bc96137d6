"""Tokenization utilities for matching."""

from __future__ import annotations

import re

from .cleaning import canonicalize


_SEPARATORS = re.compile(r"[, ]+")


def tokenize(query: str) -> list[str]:
    """검색어를 매칭용 토큰 리스트로 분리.

    - 쉼표/공백 연속 구간 기준으로 분리
    - 각 조각은 normalize + singularize
    - 빈 조각은 제거

    빈 리스트는 "검색어 없음"을 뜻합니다 ("모두 매칭"이 아님).
    """
    if not query:
        return []

    pieces = _SEPARATORS.split(query.lower())
    tokens = [canonicalize(piece) for piece in pieces]
    return [t for t in tokens if t]
