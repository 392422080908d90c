"""Parsing-related exceptions."""

from __future__ import annotations

from skillroute.exceptions.base import SkillrouteError


class SkillParseError(SkillrouteError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""
