"""Stable validation codes and allowed-key sets for config and integrity checks."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

SKL001: str = "SKL001"  # SKILL.md cannot be parsed
SKL002: str = "SKL002"  # frontmatter missing or invalid
SKL003: str = "SKL003"  # frontmatter name differs from folder
SKL004: str = "SKL004"  # routing target matches no file
SKL005: str = "SKL005"  # routing target escapes skill directory
SKL006: str = "SKL006"  # keyword repeated across rows of one table
SKL007: str = "SKL007"  # menu index missing from intake menu
SKL008: str = "SKL008"  # document unreachable from routing
SKL009: str = "SKL009"  # duplicate skill name
SKL010: str = "SKL010"  # broken relative link in a document
SKL011: str = "SKL011"  # skill has no routing table

LEVEL_ERROR: str = "error"
LEVEL_WARNING: str = "warning"
LEVEL_RANK: dict[str, int] = {LEVEL_WARNING: 1, LEVEL_ERROR: 2}

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skill_globs",
        "max_file_mb",
        "match_mode",
        "multi_match",
        "routing_headings",
        "document_dirs",
        "check_orphans",
    }
)

ALLOWED_DOCUMENT_KINDS: frozenset[str] = frozenset({"reference", "workflow", "template"})

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "skill_globs",
    "routing_headings",
)
