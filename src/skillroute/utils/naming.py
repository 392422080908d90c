"""Skill name slugs."""

from __future__ import annotations

from skillroute.constants.discovery import SKILL_NAME_FALLBACK
from skillroute.constants.naming import COLLAPSE_DASH_PATTERN, NON_SLUG_PATTERN


def sanitize_skill_name(raw_name: str) -> str:
    """Lowercase *raw_name* and fold any run of non-slug characters into one dash."""
    slug = NON_SLUG_PATTERN.sub("-", raw_name.strip().lower())
    slug = COLLAPSE_DASH_PATTERN.sub("-", slug).strip("-")
    return slug or SKILL_NAME_FALLBACK


def names_match(left: str, right: str) -> bool:
    return sanitize_skill_name(left) == sanitize_skill_name(right)
