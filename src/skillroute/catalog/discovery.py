"""File discovery and skill naming helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillroute.constants.discovery import DOCUMENT_SUFFIX, SKILL_MARKDOWN_FILENAME
from skillroute.types import DocumentKind
from skillroute.utils import sanitize_skill_name

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover SKILL.md files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in skill_globs:
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.name != SKILL_MARKDOWN_FILENAME:
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.warning("Skipping %s: larger than %d MB", stable_path_key(path, resolved_root), max_file_mb)
                    continue
            except OSError:
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def derive_skill_name(file_path: Path, *, declared_name: str | None = None) -> str:
    """Derive the lookup name for a SKILL.md: declared name first, else its folder."""
    if declared_name:
        return sanitize_skill_name(declared_name)
    return sanitize_skill_name(file_path.resolve().parent.name)


def discover_documents(
    skill_dir: Path,
    document_dirs: dict[DocumentKind, str],
) -> dict[DocumentKind, tuple[str, ...]]:
    """List Markdown documents in a skill folder, grouped by kind.

    Files under a configured document folder take that folder's kind; any
    other Markdown file except SKILL.md is ``other``.
    """
    grouped: dict[DocumentKind, list[str]] = {}
    folder_kinds = {folder: kind for kind, folder in document_dirs.items()}
    for path in sorted(skill_dir.rglob(f"*{DOCUMENT_SUFFIX}")):
        if not path.is_file():
            continue
        relative = path.relative_to(skill_dir).as_posix()
        if relative == SKILL_MARKDOWN_FILENAME:
            continue
        if _inside_nested_skill(path, skill_dir):
            continue
        kind = folder_kinds.get(relative.split("/", 1)[0], "other")
        grouped.setdefault(kind, []).append(relative)
    return {kind: tuple(paths) for kind, paths in sorted(grouped.items())}


def find_duplicate_names(names_by_file: Iterable[tuple[Path, str]]) -> dict[str, tuple[Path, ...]]:
    """Return names shared by more than one SKILL.md file."""
    paths_by_name: dict[str, list[Path]] = {}
    for path, name in names_by_file:
        paths_by_name.setdefault(name, []).append(path)
    return {name: tuple(sorted(paths)) for name, paths in sorted(paths_by_name.items()) if len(paths) > 1}


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _inside_nested_skill(path: Path, skill_dir: Path) -> bool:
    """Whether *path* belongs to another skill folder nested below *skill_dir*."""
    for parent in path.parents:
        if parent == skill_dir:
            return False
        if (parent / SKILL_MARKDOWN_FILENAME).is_file():
            return True
    return False
