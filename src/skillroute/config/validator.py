"""Config file validation for skillroute."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from skillroute.constants.config import CONFIG_FILENAME
from skillroute.constants.routing import VALID_MATCH_MODES, VALID_MULTI_MATCH_POLICIES
from skillroute.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_DOCUMENT_KINDS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
    LIST_OF_STRINGS_KEYS,
)
from skillroute.exceptions.validation import ValidationError

_ENUM_KEYS: dict[str, frozenset[str]] = {
    "match_mode": VALID_MATCH_MODES,
    "multi_match": VALID_MULTI_MATCH_POLICIES,
}


@dataclass
class _Report:
    """Collects problems found in one config file."""

    path: str
    errors: list[ValidationError] = field(default_factory=list)

    def add(self, code: str, key: str, message: str, hint: str = "") -> None:
        self.errors.append(ValidationError(code=code, path=self.path, field=key, message=message, hint=hint))


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillroute.yaml file and return all validation errors.

    Used by ``skillroute validate-config`` and by every command's preflight.
    Never raises: a missing default file is valid, a missing explicit file is
    ``CFG001``, and every other problem in the file is collected.
    """
    path = config_path.resolve() if config_path else root.resolve() / CONFIG_FILENAME
    report = _Report(str(path))

    if not path.exists():
        if config_explicit:
            report.add(CFG001, "", f"config file not found: {path}")
        return report.errors

    raw = _load_mapping(path, report)
    if raw is None:
        return report.errors

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            report.add(CFG004, str(key), f"unknown key `{key}`", suggest_name(str(key), ALLOWED_CONFIG_KEYS))

    for key, allowed in _ENUM_KEYS.items():
        if key in raw and (not isinstance(raw[key], str) or raw[key] not in allowed):
            report.add(
                CFG006,
                key,
                f"invalid value for `{key}`",
                f"expected one of: {', '.join(sorted(allowed))}; got: {raw[key]!r}",
            )

    if "max_file_mb" in raw:
        _check_max_file_mb(raw["max_file_mb"], report)
    if "check_orphans" in raw and not isinstance(raw["check_orphans"], bool):
        report.add(CFG005, "check_orphans", "invalid type for `check_orphans`", "expected a boolean")
    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            _check_string_list(key, raw[key], report)
    if raw.get("document_dirs") is not None:
        _check_document_dirs(raw["document_dirs"], report)
    return report.errors


def _load_mapping(path: Path, report: _Report) -> dict[Any, Any] | None:
    """Read *path* as YAML; return its mapping, or None when there is nothing more to check."""
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        report.add(CFG002, "", f"invalid YAML: {exc}")
        return None
    if loaded is None or isinstance(loaded, dict):
        return loaded
    report.add(CFG003, "", f"config must be a YAML mapping, got {type(loaded).__name__}")
    return None


def _check_max_file_mb(value: Any, report: _Report) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        report.add(CFG005, "max_file_mb", "invalid type for `max_file_mb`", "expected a positive integer")
    elif value <= 0:
        report.add(CFG007, "max_file_mb", f"`max_file_mb` must be a positive integer, got {value}")


def _check_string_list(key: str, value: Any, report: _Report) -> None:
    if value is None:
        return
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        report.add(CFG005, key, f"invalid type for `{key}`", "expected a list of strings")
    elif key == "skill_globs" and not any(item.strip() for item in value):
        report.add(CFG007, key, "`skill_globs` must contain at least one pattern")


def _check_document_dirs(dirs: Any, report: _Report) -> None:
    if not isinstance(dirs, dict):
        report.add(CFG009, "document_dirs", "`document_dirs` must be a mapping")
        return
    for kind in sorted(dirs, key=str):
        key = f"document_dirs.{kind}"
        if kind not in ALLOWED_DOCUMENT_KINDS:
            report.add(
                CFG004,
                key,
                f"unknown key `{kind}` in `document_dirs`",
                suggest_name(str(kind), ALLOWED_DOCUMENT_KINDS),
            )
            continue
        folder = dirs[kind]
        # one level only: documents are grouped by their first path segment
        if not isinstance(folder, str) or not folder.strip() or "/" in folder.strip("/"):
            report.add(CFG005, key, f"invalid value for `{key}`", "expected a single folder name")


def suggest_name(unknown: str, allowed: frozenset[str] | tuple[str, ...]) -> str:
    """Return a 'did you mean ...' hint for a close match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean `{matches[0]}`?" if matches else ""
