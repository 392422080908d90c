"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillroute.constants.parsing import (
    FENCED_CODE_BLOCK_PATTERN,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
)
from skillroute.exceptions import SkillParseError
from skillroute.model import DocumentLine, ParsedSkillDocument


def parse_skill_markdown_file(path: Path) -> ParsedSkillDocument:
    """Parse a SKILL.md file into frontmatter plus numbered body lines."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc
    return parse_skill_markdown_text(raw_text, path)


def parse_skill_markdown_text(raw_text: str, path: Path) -> ParsedSkillDocument:
    """Parse SKILL.md content already read from *path*."""
    lines = raw_text.lstrip("\ufeff").splitlines()
    frontmatter, body_offset = split_frontmatter(lines, path)
    body_lines = lines[body_offset:]
    return ParsedSkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body="\n".join(body_lines).strip(),
        body_start_line=body_offset + 1,
        lines=markdown_lines(body_lines, start_line=body_offset + 1),
    )


def split_frontmatter(lines: list[str], path: Path) -> tuple[dict[str, Any] | None, int]:
    """Load the leading frontmatter block and return it with the body's line offset.

    A file that does not open with ``---`` has no frontmatter and its body
    starts at offset 0. An empty block loads as ``None``.
    """
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None, 0

    closing = next(
        (
            index
            for index, line in enumerate(lines[1:], start=1)
            if line.strip() in (FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER)
        ),
        None,
    )
    if closing is None:
        raise SkillParseError(f"Unterminated frontmatter block in {path}")

    block = "\n".join(lines[1:closing])
    if not block.strip():
        return None, closing + 1
    try:
        loaded = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc
    if loaded is not None and not isinstance(loaded, dict):
        raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")
    return loaded, closing + 1


def markdown_lines(lines: list[str], *, start_line: int = 1) -> tuple[DocumentLine, ...]:
    """Number non-empty Markdown lines and mark the ones inside fenced code blocks.

    Fence lines themselves count as code-block lines. A block only closes on
    a fence of the same character that opened it.
    """
    numbered: list[DocumentLine] = []
    open_fence = ""
    for line_number, line in enumerate(lines, start=start_line):
        text = line.strip()
        fence = FENCED_CODE_BLOCK_PATTERN.match(text)
        if fence:
            marker = fence.group(1)[0]
            if not open_fence:
                open_fence = marker
            elif open_fence == marker:
                open_fence = ""
                numbered.append(DocumentLine(line=line_number, text=text, in_code_block=True))
                continue
        if text:
            numbered.append(DocumentLine(line=line_number, text=text, in_code_block=bool(open_fence)))
    return tuple(numbered)


def frontmatter_string(frontmatter: dict[str, Any] | None, key: str) -> str | None:
    """Return a stripped non-empty string frontmatter value, or None."""
    if not isinstance(frontmatter, dict):
        return None
    value = frontmatter.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
