"""Shared helpers."""

from .naming import names_match, sanitize_skill_name

__all__ = ["names_match", "sanitize_skill_name"]
