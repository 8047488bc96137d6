"""Text utilities.

Implementation is organized under:
- core/      normalization, singularization, tokenization
- matching/  edit distance, window similarity, thresholds, block matching
- highlight  span -> display segments
"""

from .core import canonicalize, normalize, singularize, tokenize
from .highlight import HighlightSegment, highlight_block
from .matching import (
    BlockMatch,
    MatchSpan,
    best_window_similarity,
    levenshtein,
    match_token_to_block,
    threshold_for,
)

__all__ = [
    # core
    "canonicalize",
    "normalize",
    "singularize",
    "tokenize",
    # matching
    "BlockMatch",
    "MatchSpan",
    "best_window_similarity",
    "levenshtein",
    "match_token_to_block",
    "threshold_for",
    # highlight
    "HighlightSegment",
    "highlight_block",
]
