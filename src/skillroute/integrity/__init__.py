"""Load-time integrity checks for skill folders."""

from __future__ import annotations

from .checks import check_skill, check_workspace, exceeds_threshold

__all__ = ["check_skill", "check_workspace", "exceeds_threshold"]
