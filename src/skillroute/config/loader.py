"""Config loading and normalization for skillroute."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillroute.config.model import SkillrouteConfig
from skillroute.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_DOCUMENT_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_ROUTING_HEADINGS,
    DEFAULT_SKILL_GLOBS,
)
from skillroute.constants.routing import (
    DEFAULT_MATCH_MODE,
    DEFAULT_MULTI_MATCH,
    VALID_MATCH_MODES,
    VALID_MULTI_MATCH_POLICIES,
)
from skillroute.constants.validation import ALLOWED_DOCUMENT_KINDS
from skillroute.exceptions import ConfigError
from skillroute.types import DocumentKind

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillrouteConfig:
    """Load and validate config from ``skillroute.yaml`` or an explicit path.

    A missing ``skillroute.yaml`` yields the defaults; a missing explicit file
    is an error.
    """
    path = config_path.resolve() if config_path else root.resolve() / CONFIG_FILENAME
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillrouteConfig()

    raw = _read_mapping(path)
    logger.debug("Loaded config from %s", path)

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    check_orphans = raw.get("check_orphans", True)
    if not isinstance(check_orphans, bool):
        raise ConfigError("check_orphans must be a boolean")

    match_mode = _choice(raw, "match_mode", DEFAULT_MATCH_MODE, VALID_MATCH_MODES)
    multi_match = _choice(raw, "multi_match", DEFAULT_MULTI_MATCH, VALID_MULTI_MATCH_POLICIES)

    skill_globs = tuple(
        pattern for pattern in _ensure_string_list(raw.get("skill_globs", DEFAULT_SKILL_GLOBS), "skill_globs")
        if pattern.strip()
    )
    if not skill_globs:
        raise ConfigError("skill_globs must contain at least one pattern")

    routing_headings = tuple(
        heading.strip().lower()
        for heading in _ensure_string_list(
            raw.get("routing_headings", list(DEFAULT_ROUTING_HEADINGS)),
            "routing_headings",
        )
        if heading.strip()
    )

    return SkillrouteConfig(
        skill_globs=skill_globs,
        max_file_mb=max_file_mb,
        match_mode=match_mode,  # type: ignore[arg-type]
        multi_match=multi_match,  # type: ignore[arg-type]
        routing_headings=routing_headings or DEFAULT_ROUTING_HEADINGS,
        document_dirs=_build_document_dirs(raw.get("document_dirs")),
        check_orphans=check_orphans,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _build_document_dirs(raw: Any) -> dict[DocumentKind, str]:
    """Merge a ``document_dirs`` override onto the default folder names."""
    merged: dict[DocumentKind, str] = dict(DEFAULT_DOCUMENT_DIRS)  # type: ignore[arg-type]
    if raw is None:
        return merged
    if not isinstance(raw, dict):
        raise ConfigError("document_dirs must be a mapping")
    for kind, folder in raw.items():
        if kind not in ALLOWED_DOCUMENT_KINDS:
            raise ConfigError(f"document_dirs has unknown kind {kind!r}")
        if not isinstance(folder, str) or not folder.strip() or "/" in folder.strip("/"):
            raise ConfigError(f"document_dirs.{kind} must be a single folder name")
        merged[kind] = folder.strip().strip("/")
    return merged


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def _choice(raw: dict[str, Any], key: str, default: str, allowed: frozenset[str]) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or value not in allowed:
        raise ConfigError(f"{key} must be one of {sorted(allowed)}, got {value!r}")
    return value
