"""Core text processing (normalization, singularization, tokenization)."""

from .cleaning import canonicalize, normalize, singularize
from .tokenize import tokenize

__all__ = [
    "canonicalize",
    "normalize",
    "singularize",
    "tokenize",
]
