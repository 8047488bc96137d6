"""Match value types shared by the similarity and block matchers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchSpan:
    """정규화된 후보 문자열 안에서 가장 잘 맞은 구간

    Attributes:
        score: 유사도 (0~1, 1이면 정확한 부분 문자열)
        start: 윈도우 시작 인덱스 (윈도우가 아닌 전체 비교면 None)
        end: 윈도우 끝 인덱스 (exclusive)
        exact: 부분 문자열 정확 일치 여부
    """

    score: float
    start: Optional[int] = None
    end: Optional[int] = None
    exact: bool = False

    @property
    def has_window(self) -> bool:
        return self.start is not None and self.end is not None


NO_MATCH = MatchSpan(score=0.0)


@dataclass(frozen=True)
class BlockMatch:
    """블록 하나에 대한 토큰 매칭 결과

    matched_word_index가 None이면 블록 전체 텍스트와 비교한 결과입니다.
    """

    block: str
    token: str
    span: MatchSpan
    matched_word_index: Optional[int] = None

    @property
    def score(self) -> float:
        return self.span.score
