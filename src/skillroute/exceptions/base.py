"""Base exception for skillroute."""

from __future__ import annotations


class SkillrouteError(Exception):
    """Root of all skillroute errors."""
