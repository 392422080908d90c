"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillroute.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("**/SKILL.md",)

DEFAULT_ROUTING_HEADINGS: tuple[str, ...] = ("routing",)

DEFAULT_DOCUMENT_DIRS: dict[str, str] = {
    "reference": "references",
    "workflow": "workflows",
    "template": "templates",
}
