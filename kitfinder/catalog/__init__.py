"""Catalog loading - export only."""

from .loader import (
    Catalog,
    EMPTY_CATALOG,
    build_catalog,
    load_catalog,
    parse_kits_text,
    parse_kits_yaml,
)

__all__ = [
    "Catalog",
    "EMPTY_CATALOG",
    "build_catalog",
    "load_catalog",
    "parse_kits_text",
    "parse_kits_yaml",
]
