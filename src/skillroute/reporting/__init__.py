"""Reporting package for skillroute outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["build_catalog", "write_catalog"]


def __getattr__(name: str) -> Any:
    """Lazily expose catalog writers to avoid import cycles at package import time."""
    if name in {"build_catalog", "write_catalog"}:
        from .writer import build_catalog, write_catalog

        exports = {
            "build_catalog": build_catalog,
            "write_catalog": write_catalog,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
