"""Routing resolution: intake response to document targets."""

from __future__ import annotations

from .matching import keyword_matches, menu_index_of, normalize_response
from .resolver import matching_rules, resolve_route

__all__ = [
    "keyword_matches",
    "matching_rules",
    "menu_index_of",
    "normalize_response",
    "resolve_route",
]
