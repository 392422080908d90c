"""Configuration-related exceptions."""

from __future__ import annotations

from skillroute.exceptions.base import SkillrouteError


class ConfigError(SkillrouteError, ValueError):
    """Raised when skillroute configuration is invalid."""
