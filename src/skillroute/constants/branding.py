"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLROUTE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLROUTE",
    "     // intake -> routing table -> documents",
)
CHECK_SUMMARY_TITLE: str = "Integrity check"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill document router"))
