"""Markdown parsers for SKILL.md files and skill documents."""

from __future__ import annotations

from .checklist import parse_checklist
from .intake import parse_intake
from .routing_table import parse_routing_tables, parse_targets, parse_triggers
from .sections import section_tags
from .skill_markdown import frontmatter_string, markdown_lines, parse_skill_markdown_file, parse_skill_markdown_text

__all__ = [
    "frontmatter_string",
    "markdown_lines",
    "parse_checklist",
    "parse_intake",
    "parse_routing_tables",
    "parse_skill_markdown_file",
    "parse_skill_markdown_text",
    "parse_targets",
    "parse_triggers",
    "section_tags",
]
