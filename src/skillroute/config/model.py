"""Config data model for skillroute."""

from __future__ import annotations

from dataclasses import dataclass, field

from skillroute.constants.config import (
    DEFAULT_DOCUMENT_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_ROUTING_HEADINGS,
    DEFAULT_SKILL_GLOBS,
)
from skillroute.constants.routing import DEFAULT_MATCH_MODE, DEFAULT_MULTI_MATCH
from skillroute.types import DocumentKind, MatchMode, MultiMatchPolicy


@dataclass(frozen=True)
class SkillrouteConfig:
    """Resolved workspace config."""

    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    match_mode: MatchMode = DEFAULT_MATCH_MODE
    multi_match: MultiMatchPolicy = DEFAULT_MULTI_MATCH
    routing_headings: tuple[str, ...] = DEFAULT_ROUTING_HEADINGS
    document_dirs: dict[DocumentKind, str] = field(default_factory=lambda: dict(DEFAULT_DOCUMENT_DIRS))
    check_orphans: bool = True

    def kind_for(self, relative_path: str) -> DocumentKind:
        """Classify a skill-relative document path by its top-level folder."""
        head = relative_path.split("/", 1)[0]
        for kind, folder in sorted(self.document_dirs.items()):
            if head == folder:
                return kind
        return "other"
