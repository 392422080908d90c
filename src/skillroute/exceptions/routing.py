"""Lookup, routing and document-loading exceptions."""

from __future__ import annotations

from skillroute.exceptions.base import SkillrouteError


class SkillNotFoundError(SkillrouteError, LookupError):
    """Raised when a skill name does not resolve to a loaded skill."""


class RoutingInputError(SkillrouteError, ValueError):
    """Raised when a routing response is empty."""


class DocumentLoadError(SkillrouteError, OSError):
    """Raised when a routed document cannot be located or read."""
