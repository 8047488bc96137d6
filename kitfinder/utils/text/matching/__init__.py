"""Matching package.

Edit-distance similarity, adaptive thresholds and block-level matching.
"""

from .matching import match_token_to_block
from .similarity import best_window_similarity, levenshtein, threshold_for
from .types import BlockMatch, MatchSpan, NO_MATCH

__all__ = [
    "match_token_to_block",
    "best_window_similarity",
    "levenshtein",
    "threshold_for",
    "BlockMatch",
    "MatchSpan",
    "NO_MATCH",
]
