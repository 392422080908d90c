"""Verification checklist extraction."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from skillroute.constants.parsing import (
    CHECKLIST_ITEM_PATTERN,
    FENCED_CODE_BLOCK_PATTERN,
    INLINE_CODE_PATTERN,
    VERIFICATION_HEADING_KEYWORDS,
    VERIFICATION_TAGS,
)
from skillroute.model import ChecklistItem, DocumentLine
from skillroute.parsers.sections import clean_inline, heading_of, heading_sections, tag_block


def parse_checklist(lines: Sequence[DocumentLine]) -> tuple[ChecklistItem, ...]:
    """Collect verification items from checklist tags or headings.

    A bullet becomes one item; its command is its first inline code span or,
    failing that, the whole fenced block directly under it. Fenced blocks not
    attached to a bullet become items of their own.
    """
    items: list[ChecklistItem] = []
    seen: set[tuple[str, int | None]] = set()
    for region in _verification_regions(lines):
        for item in _items_in_region(region):
            key = (item.text, item.line)
            if key in seen:
                continue
            seen.add(key)
            items.append(item)
    return tuple(sorted(items, key=lambda item: item.line or 0))


def _verification_regions(lines: Sequence[DocumentLine]) -> list[tuple[DocumentLine, ...]]:
    regions: list[tuple[DocumentLine, ...]] = []
    for tag in sorted(VERIFICATION_TAGS):
        block = tag_block(lines, tag)
        if block is not None:
            regions.append(block)
    regions.extend(heading_sections(lines, VERIFICATION_HEADING_KEYWORDS))
    return regions


def _items_in_region(region: tuple[DocumentLine, ...]) -> list[ChecklistItem]:
    items: list[ChecklistItem] = []
    pending: ChecklistItem | None = None
    last_text_line = 0
    open_fence: str | None = None
    fence_line = 0
    block: list[DocumentLine] = []

    for line in region:
        if line.in_code_block:
            fence = FENCED_CODE_BLOCK_PATTERN.match(line.text)
            if open_fence is None:
                # a region may start inside a block, with no opening fence
                open_fence = fence.group(1)[0] if fence else ""
                fence_line = line.line
                block = [] if fence else [line]
            elif fence and fence.group(1)[0] == open_fence:
                pending = _take_block(items, pending, block, attach=fence_line <= last_text_line + 2)
                open_fence = None
            else:
                block.append(line)
            continue

        if heading_of(line) is not None:
            if pending is not None:
                items.append(pending)
            pending = None
            continue

        match = CHECKLIST_ITEM_PATTERN.match(line.text)
        if match:
            if pending is not None:
                items.append(pending)
            text = clean_inline(match.group(1))
            code = INLINE_CODE_PATTERN.search(text)
            pending = ChecklistItem(text=text, command=code.group(1) if code else None, line=line.line)
        last_text_line = line.line

    if open_fence is not None:
        pending = _take_block(items, pending, block, attach=fence_line <= last_text_line + 2)
    if pending is not None:
        items.append(pending)
    return items


def _take_block(
    items: list[ChecklistItem],
    pending: ChecklistItem | None,
    block: list[DocumentLine],
    *,
    attach: bool,
) -> ChecklistItem | None:
    """Record a finished fenced block and return the bullet still waiting for a command."""
    if not block:
        return pending
    command = "\n".join(line.text for line in block)
    if attach and pending is not None and pending.command is None:
        items.append(replace(pending, command=command))
        return None
    if pending is not None:
        items.append(pending)
    items.append(ChecklistItem(text=command, command=command, line=block[0].line))
    return None
