"""블록 매칭 테스트"""

import pytest

from kitfinder.utils.text import match_token_to_block


def test_full_text_wins_ties_with_words():
    """전체 텍스트와 단어 점수가 같으면 전체 텍스트 결과"""
    match = match_token_to_block("plank", "Oak Planks")
    assert match.score == 1.0
    assert match.matched_word_index is None
    assert (match.span.start, match.span.end) == (4, 9)
    assert match.block == "Oak Planks"
    assert match.token == "plank"


def test_word_beats_full_text():
    """단어 단위 전체 문자열 비교가 더 높으면 해당 단어 위치 기록"""
    match = match_token_to_block("stone", "Stoone Wall")
    assert match.score == pytest.approx(5 / 6)
    assert match.matched_word_index == 0
    assert match.span.start is None


def test_fuzzy_full_text_window():
    match = match_token_to_block("stome", "Stone")
    assert match.score == pytest.approx(0.8)
    assert match.matched_word_index is None
    assert match.span.exact is False


def test_no_similarity():
    match = match_token_to_block("xyz999", "Stone")
    assert match.score < 0.5


def test_empty_block():
    match = match_token_to_block("stone", "")
    assert match.score == 0.0
    assert match.matched_word_index is None
