"""강조 구간 테스트"""

from kitfinder.utils.text import BlockMatch, MatchSpan, highlight_block, match_token_to_block


def _pairs(segments):
    return [(s.text, s.marked) for s in segments]


def test_exact_prefix_on_full_text():
    match = match_token_to_block("gr", "Grass Block")
    assert _pairs(highlight_block(match)) == [("Gr", True), ("ass Block", False)]


def test_whitespace_is_collapsed_before_mapping():
    match = match_token_to_block("block", "Grass   Block")
    assert _pairs(highlight_block(match)) == [("Grass ", False), ("Block", True)]


def test_fuzzy_window():
    match = match_token_to_block("stome", "Cobblestone")
    assert _pairs(highlight_block(match)) == [("Cobble", False), ("stone", True)]


def test_word_span():
    match = BlockMatch(
        block="Oak  Planks",
        token="plank",
        span=MatchSpan(score=1.0, start=0, end=5, exact=True),
        matched_word_index=1,
    )
    assert _pairs(highlight_block(match)) == [("Oak ", False), ("Plank", True), ("s", False)]


def test_no_window_is_unmarked():
    match = match_token_to_block("stone", "Stoone Wall")
    assert _pairs(highlight_block(match)) == [("Stoone Wall", False)]


def test_length_changing_normalization_is_unmarked():
    match = BlockMatch(
        block="ﬁre Pit",
        token="pit",
        span=MatchSpan(score=1.0, start=5, end=8, exact=True),
    )
    assert _pairs(highlight_block(match)) == [("ﬁre Pit", False)]


def test_word_index_out_of_range():
    match = BlockMatch(
        block="Stone",
        token="stone",
        span=MatchSpan(score=1.0, start=0, end=5, exact=True),
        matched_word_index=3,
    )
    assert _pairs(highlight_block(match)) == [("Stone", False)]


def test_singularized_tail_is_unmarked():
    # "sweet berries" 는 "sweet berry" 로 매칭되므로 [6, 11) 은 "Berri" 가 아니다
    match = match_token_to_block("berry", "Sweet Berries")
    assert match.matched_word_index is None
    assert _pairs(highlight_block(match)) == [("Sweet Berries", False)]


def test_singularized_stem_still_marked():
    match = match_token_to_block("plank", "Oak Planks")
    assert _pairs(highlight_block(match)) == [("Oak ", False), ("Plank", True), ("s", False)]


def test_singularized_word_span_is_unmarked():
    match = BlockMatch(
        block="Sweet Berries",
        token="berry",
        span=MatchSpan(score=1.0, start=0, end=5, exact=True),
        matched_word_index=1,
    )
    assert _pairs(highlight_block(match)) == [("Sweet Berries", False)]


def test_word_prefix_before_singularized_tail():
    match = BlockMatch(
        block="Sweet Berries",
        token="ber",
        span=MatchSpan(score=1.0, start=0, end=3, exact=True),
        matched_word_index=1,
    )
    assert _pairs(highlight_block(match)) == [("Sweet ", False), ("Ber", True), ("ries", False)]
