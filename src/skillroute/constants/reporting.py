"""Constants for catalog files, atomic writing, and stdout formatting."""

from __future__ import annotations

CATALOG_FILENAME: str = "catalog.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

LEVEL_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
}

STATUS_COLORS: dict[str, str] = {
    "matched": ANSI_GREEN,
    "ambiguous": ANSI_YELLOW,
    "no_match": ANSI_RED,
}
