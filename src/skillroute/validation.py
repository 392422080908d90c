"""Preflight validation shared by every CLI command."""

from __future__ import annotations

from pathlib import Path

from skillroute.config import validate_config_file
from skillroute.constants.validation import CFG010
from skillroute.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Check the workspace root and config file, returning errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    config_explicit = config_path is not None
    return sort_errors(validate_config_file(root, config_path, config_explicit=config_explicit))
