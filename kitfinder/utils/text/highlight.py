"""Highlight segments for matched blocks.

Spans are computed on the normalized text, so they are mapped back onto the
whitespace-collapsed display text. Matching is never re-run here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.cleaning import canonicalize, normalize
from .matching.types import BlockMatch


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    marked: bool = False


def _mark(text: str, start: int, end: int) -> list[HighlightSegment]:
    end = min(end, len(text))
    if start < 0 or start >= end:
        return [HighlightSegment(text)]

    segments = []
    if start > 0:
        segments.append(HighlightSegment(text[:start]))
    segments.append(HighlightSegment(text[start:end], marked=True))
    if end < len(text):
        segments.append(HighlightSegment(text[end:]))
    return segments


def _maps_onto(matched: str, shown: str, start: int, end: int) -> bool:
    """matched 의 [start, end) 가 shown 의 같은 위치 글자와 대응하는지 확인.

    정규화로 길이가 바뀌거나 단수화로 끝부분이 바뀐 구간은 대응하지 않습니다.
    """
    normalized = normalize(shown)
    return len(normalized) == len(shown) and matched[start:end] == normalized[start:end]


def highlight_block(match: BlockMatch) -> list[HighlightSegment]:
    """BlockMatch의 span 정보로 블록 텍스트를 강조 구간으로 분할.

    - 전체 텍스트 매칭: 블록 텍스트의 [start, end) 강조
    - 단어 매칭: matched_word_index 단어 내부의 [start, end) 강조
    - 윈도우가 없는 매칭(접두사/전체 문자열 유사도)이나
      정규화/단수화로 위치를 복원할 수 없으면 강조 없이 반환
    """
    words = match.block.split()
    display = " ".join(words)
    span = match.span

    if not span.has_window:
        return [HighlightSegment(display)]

    if match.matched_word_index is None:
        if not _maps_onto(canonicalize(display), display, span.start, span.end):
            return [HighlightSegment(display)]
        return _mark(display, span.start, span.end)

    index = match.matched_word_index
    matched_words = canonicalize(display).split(" ")
    if index >= len(words) or index >= len(matched_words):
        return [HighlightSegment(display)]
    if not _maps_onto(canonicalize(matched_words[index]), words[index], span.start, span.end):
        return [HighlightSegment(display)]

    segments = _mark(words[index], span.start, span.end)
    before = " ".join(words[:index])
    after = " ".join(words[index + 1:])
    if before:
        segments.insert(0, HighlightSegment(before + " "))
    if after:
        segments.append(HighlightSegment(" " + after))
    return _merge(segments)


def _merge(segments: list[HighlightSegment]) -> list[HighlightSegment]:
    merged: list[HighlightSegment] = []
    for segment in segments:
        if merged and merged[-1].marked == segment.marked:
            merged[-1] = HighlightSegment(merged[-1].text + segment.text, segment.marked)
        else:
            merged.append(segment)
    return merged
