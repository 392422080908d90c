"""Constants for SKILL.md and document parsing."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

FENCED_CODE_BLOCK_PATTERN: Pattern[str] = re.compile(r"^(`{3,}|~{3,})")
HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
SECTION_TAG_OPEN_PATTERN: Pattern[str] = re.compile(r"^<([a-z][a-z0-9_-]*)>$")
SECTION_TAG_CLOSE_PATTERN: Pattern[str] = re.compile(r"^</([a-z][a-z0-9_-]*)>$")
SECTION_TAG_ANY_PATTERN: Pattern[str] = re.compile(r"<([a-z][a-z0-9_-]*)>")

INTAKE_TAG: str = "intake"
ROUTING_TAG: str = "routing"
INTAKE_HEADING_KEYWORD: str = "intake"
VERIFICATION_TAGS: frozenset[str] = frozenset({"verification", "success_criteria", "checklist"})
VERIFICATION_HEADING_KEYWORDS: tuple[str, ...] = ("verification", "verify", "checklist")

MENU_OPTION_PATTERN: Pattern[str] = re.compile(r"^(\d+)[.)]\s+(.+)$")
TABLE_ROW_PATTERN: Pattern[str] = re.compile(r"^\|.*\|$")
TABLE_SEPARATOR_CELL_PATTERN: Pattern[str] = re.compile(r"^:?-{3,}:?$")
BACKTICK_SPAN_PATTERN: Pattern[str] = re.compile(r"`([^`]+)`")
BARE_DOCUMENT_PATH_PATTERN: Pattern[str] = re.compile(r"(?<![\w/.-])([\w./*-]+\.md)\b")
URL_PATTERN: Pattern[str] = re.compile(r"\S+://\S*")
TRIGGER_SPLIT_PATTERN: Pattern[str] = re.compile(r",|;|\s+or\s+", re.IGNORECASE)
TRIGGER_STRIP_CHARS: str = " \t\"'`“”‘’*_"

CHECKLIST_ITEM_PATTERN: Pattern[str] = re.compile(r"^[-*+]\s+(?:\[[ xX]\]\s+)?(.+)$")
INLINE_CODE_PATTERN: Pattern[str] = re.compile(r"`([^`]+)`")
MARKDOWN_LINK_PATTERN: Pattern[str] = re.compile(r"\[[^\]]*\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)")
EXTERNAL_LINK_PREFIXES: tuple[str, ...] = ("http://", "https://", "mailto:", "#", "/")
# Each quote style closes with its own character. An apostrophe inside a word is not a quote.
QUOTED_TRIGGER_PATTERN: Pattern[str] = re.compile(
    r"\"([^\"]+)\"|“([^”]+)”|‘([^’]+)’|(?<!\w)'([^']+)'(?!\w)|`([^`]+)`"
)
BARE_INDEX_TOKEN_PATTERN: Pattern[str] = re.compile(r"(?<![\w\"'`])(\d+)(?![\w\"'`])")
