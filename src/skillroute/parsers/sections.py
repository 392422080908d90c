"""Locate tag-delimited and heading-delimited regions in Markdown lines.

Skill authors delimit prose with informal XML-style tags (``<intake>``,
``<routing>``) or with headings (``## Task Routing``). Neither is a parsed
format, so both lookups are lenient: a missing closing tag runs to the end
of the document, and lines inside fenced code blocks are never treated as
delimiters.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from skillroute.constants.parsing import (
    HEADING_PATTERN,
    SECTION_TAG_ANY_PATTERN,
    SECTION_TAG_CLOSE_PATTERN,
    SECTION_TAG_OPEN_PATTERN,
)
from skillroute.model import DocumentLine


def heading_of(line: DocumentLine) -> tuple[int, str] | None:
    """Return ``(level, text)`` when *line* is a Markdown heading."""
    if line.in_code_block:
        return None
    match = HEADING_PATTERN.match(line.text)
    if not match:
        return None
    return len(match.group(1)), clean_inline(match.group(2))


def clean_inline(text: str) -> str:
    """Strip emphasis markers and surrounding whitespace from inline Markdown."""
    return text.replace("**", "").replace("__", "").strip().strip("*_").strip()


def tag_block(lines: Sequence[DocumentLine], tag: str) -> tuple[DocumentLine, ...] | None:
    """Return lines between ``<tag>`` and ``</tag>``, or None when the tag is absent."""
    start: int | None = None
    for index, line in enumerate(lines):
        if line.in_code_block:
            continue
        if start is None:
            match = SECTION_TAG_OPEN_PATTERN.match(line.text)
            if match and match.group(1) == tag:
                start = index + 1
            continue
        match = SECTION_TAG_CLOSE_PATTERN.match(line.text)
        if match and match.group(1) == tag:
            return tuple(lines[start:index])
    if start is None:
        return None
    return tuple(lines[start:])


def heading_sections(
    lines: Sequence[DocumentLine],
    keywords: Iterable[str],
) -> list[tuple[DocumentLine, ...]]:
    """Return every heading section whose title contains one of *keywords*.

    A section runs from its heading to the next heading of the same or a
    higher level; the heading line itself is included.
    """
    lowered = tuple(keyword.lower() for keyword in keywords if keyword.strip())
    sections: list[tuple[DocumentLine, ...]] = []
    for index, line in enumerate(lines):
        heading = heading_of(line)
        if heading is None:
            continue
        level, text = heading
        if not any(keyword in text.lower() for keyword in lowered):
            continue
        end = len(lines)
        for cursor in range(index + 1, len(lines)):
            other = heading_of(lines[cursor])
            if other is not None and other[0] <= level:
                end = cursor
                break
        sections.append(tuple(lines[index:end]))
    return sections


def section_tags(lines: Sequence[DocumentLine]) -> tuple[str, ...]:
    """Return distinct opening section tags in order of first appearance."""
    seen: dict[str, None] = {}
    for line in lines:
        if line.in_code_block:
            continue
        match = SECTION_TAG_OPEN_PATTERN.match(line.text)
        if match:
            seen.setdefault(match.group(1), None)
            continue
        if line.text.startswith("<") and not line.text.startswith("</"):
            inline = SECTION_TAG_ANY_PATTERN.match(line.text)
            if inline:
                seen.setdefault(inline.group(1), None)
    return tuple(seen)
