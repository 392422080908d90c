"""Configuration loading, validation, and normalization for skillroute."""

from __future__ import annotations

from skillroute.config.loader import load_config
from skillroute.config.model import SkillrouteConfig
from skillroute.config.validator import suggest_name, validate_config_file

__all__ = [
    "SkillrouteConfig",
    "load_config",
    "suggest_name",
    "validate_config_file",
]
