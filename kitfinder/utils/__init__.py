"""Utilities package"""

from .hash_utils import hash_string

__all__ = [
    "hash_string",
]
