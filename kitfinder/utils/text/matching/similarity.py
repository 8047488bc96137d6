"""Similarity helpers."""

from __future__ import annotations

from ..core.cleaning import canonicalize
from .types import MatchSpan


def levenshtein(a: str, b: str) -> int:
    """두 문자열의 편집 거리 (삽입/삭제/치환 각 1).

    전체 행렬 대신 길이 len(b)+1 인 행 두 개만 번갈아 사용합니다.
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            curr[j] = min(
                curr[j - 1] + 1,     # insert
                prev[j] + 1,         # delete
                prev[j - 1] + cost,  # substitute
            )
        prev, curr = curr, prev

    return prev[n]


def _edit_similarity(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def best_window_similarity(candidate: str, token: str) -> MatchSpan:
    """후보 텍스트 안에서 토큰과 가장 잘 맞는 구간을 찾는다.

    평가 순서:
    1. 부분 문자열 정확 일치 → 1.0 즉시 반환
    2. 접두사 포함 관계 → min(len)/max(len) 를 하한으로 사용
    3. 토큰 길이의 슬라이딩 윈도우 편집 유사도 (오타 위치 무관)
    4. 전체 문자열 편집 유사도 (후보가 토큰보다 짧은 경우 등)

    점수가 같으면 먼저 평가된 쪽이 유지됩니다.

    Args:
        candidate: 블록 텍스트 또는 블록의 단어
        token: 검색 토큰

    Returns:
        MatchSpan (윈도우에서 나온 점수일 때만 start/end 설정)
    """
    t = canonicalize(candidate)
    q = canonicalize(token)
    if not q:
        return MatchSpan(score=0.0)

    # 정확 일치 fast path
    idx = t.find(q)
    if idx != -1:
        return MatchSpan(score=1.0, start=idx, end=idx + len(q), exact=True)

    prefix_score = 0.0
    if t.startswith(q) or q.startswith(t):
        prefix_score = min(len(t), len(q)) / max(len(t), len(q))

    best = MatchSpan(score=prefix_score)
    if not t:
        return best

    width = len(q)
    for start in range(max(0, len(t) - width) + 1):
        window = t[start:start + width]
        sim = _edit_similarity(window, q)
        if sim > best.score:
            best = MatchSpan(score=sim, start=start, end=start + len(window))
        if best.score == 1.0:
            break

    whole = _edit_similarity(t, q)
    if whole > best.score:
        best = MatchSpan(score=whole)

    return best


def threshold_for(token_length: int) -> float:
    """토큰 길이별 최소 허용 유사도.

    1~2자는 오타와 다른 단어를 구분할 수 없어 정확 일치만 허용하고,
    길수록 글자당 정보량이 많으므로 기준을 완화합니다.
    """
    if token_length <= 2:
        return 1.0
    if token_length == 3:
        return 0.85
    if token_length <= 5:
        return 0.78
    if token_length <= 8:
        return 0.72
    return 0.68
