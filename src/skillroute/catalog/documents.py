"""Expand routed targets into files and load them as documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from skillroute.config import SkillrouteConfig
from skillroute.constants.routing import GLOB_CHARS
from skillroute.exceptions import DocumentLoadError
from skillroute.model import Document, RouteResolution, Skill
from skillroute.parsers import markdown_lines, parse_checklist, section_tags

logger = logging.getLogger(__name__)


def is_glob(target: str) -> bool:
    return any(char in GLOB_CHARS for char in target)


def escapes_skill_dir(target: str) -> bool:
    """Whether a skill-relative target points outside its skill folder."""
    pure = PurePosixPath(target)
    return pure.is_absolute() or ".." in pure.parts


def expand_target(skill: Skill, target: str) -> list[str]:
    """Return skill-relative paths of existing files a target names, sorted.

    Raises:
        DocumentLoadError: when the target escapes the skill folder.
    """
    if escapes_skill_dir(target):
        raise DocumentLoadError(f"Target {target!r} escapes skill folder {skill.directory}")

    if is_glob(target):
        matches = sorted(path for path in skill.directory.glob(target) if path.is_file())
    else:
        candidate = skill.directory / target
        matches = [candidate] if candidate.is_file() else []
    return [path.relative_to(skill.directory).as_posix() for path in matches]


def expand_targets(skill: Skill, targets: Iterable[str]) -> tuple[str, ...]:
    """Expand targets in order, dropping duplicates."""
    expanded: dict[str, None] = {}
    for target in targets:
        for relative in expand_target(skill, target):
            expanded.setdefault(relative, None)
    return tuple(expanded)


def load_document(skill: Skill, relative_path: str, config: SkillrouteConfig) -> Document:
    """Read one skill document.

    Raises:
        DocumentLoadError: when the path escapes the skill folder or cannot be read.
    """
    if escapes_skill_dir(relative_path):
        raise DocumentLoadError(f"Document {relative_path!r} escapes skill folder {skill.directory}")
    path = skill.directory / relative_path
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Cannot read {relative_path} in skill {skill.name}: {exc}") from exc

    lines = markdown_lines(content.splitlines())
    return Document(
        path=relative_path,
        kind=config.kind_for(relative_path),
        content=content,
        section_tags=section_tags(lines),
        checklist=parse_checklist(lines),
    )


def load_routed_documents(
    skill: Skill,
    resolution: RouteResolution,
    config: SkillrouteConfig,
) -> tuple[Document, ...]:
    """Load every file a resolution routes to, in routing order.

    Raises:
        DocumentLoadError: when a routed target matches no file.
    """
    documents: list[Document] = []
    seen: set[str] = set()
    for target in resolution.documents:
        expanded = expand_target(skill, target)
        if not expanded:
            raise DocumentLoadError(
                f"Routing target {target!r} in skill {skill.name} matches no file; run `skillroute check`"
            )
        for relative in expanded:
            if relative in seen:
                continue
            seen.add(relative)
            documents.append(load_document(skill, relative, config))
    logger.debug("Loaded %d documents for skill %s", len(documents), skill.name)
    return tuple(documents)
