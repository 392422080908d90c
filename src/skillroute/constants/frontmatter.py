"""JSON Schema for SKILL.md frontmatter."""

from __future__ import annotations

from typing import Any

FRONTMATTER_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "description"],
    "properties": {
        "name": {"type": "string", "minLength": 1, "pattern": r"\S"},
        "description": {"type": "string", "minLength": 1, "pattern": r"\S"},
    },
}
