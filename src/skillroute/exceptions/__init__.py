"""Shared exception hierarchy for skillroute."""

from __future__ import annotations

from .base import SkillrouteError
from .config import ConfigError
from .parsing import SkillParseError
from .routing import DocumentLoadError, RoutingInputError, SkillNotFoundError

__all__ = [
    "ConfigError",
    "DocumentLoadError",
    "RoutingInputError",
    "SkillNotFoundError",
    "SkillParseError",
    "SkillrouteError",
]
