"""skillroute: intake, routing-table and document resolution for Markdown skill folders."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
