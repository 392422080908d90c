"""Routing-table extraction from SKILL.md bodies.

A routing table is a Markdown pipe table. The first column holds triggers
(quoted keywords and numeric menu indices, separated by commas or "or");
the remaining columns hold skill-relative document paths, normally in
backticks. Rows without triggers or targets are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from skillroute.constants.discovery import DOCUMENT_SUFFIX
from skillroute.constants.parsing import (
    BACKTICK_SPAN_PATTERN,
    BARE_DOCUMENT_PATH_PATTERN,
    BARE_INDEX_TOKEN_PATTERN,
    QUOTED_TRIGGER_PATTERN,
    ROUTING_TAG,
    TABLE_ROW_PATTERN,
    TABLE_SEPARATOR_CELL_PATTERN,
    TRIGGER_SPLIT_PATTERN,
    TRIGGER_STRIP_CHARS,
    URL_PATTERN,
)
from skillroute.constants.routing import MENU_INDEX_INPUT_PATTERN
from skillroute.model import DocumentLine, RoutingRule, RoutingTable
from skillroute.parsers.sections import heading_of, heading_sections, tag_block

logger = logging.getLogger(__name__)

DEFAULT_TABLE_NAME: str = "Routing"


def parse_routing_tables(
    lines: Sequence[DocumentLine],
    routing_headings: Iterable[str],
) -> tuple[RoutingTable, ...]:
    """Parse every routing table in a SKILL.md body.

    Tables inside a ``<routing>`` block win; without one, tables under any
    heading containing a routing keyword are used.
    """
    block = tag_block(lines, ROUTING_TAG)
    regions = [block] if block is not None else heading_sections(lines, routing_headings)

    tables: list[RoutingTable] = []
    seen_lines: set[int] = set()
    for region in regions:
        for table in _tables_in_region(region):
            if table.line in seen_lines:
                continue
            seen_lines.add(table.line)
            tables.append(table)
    return tuple(sorted(tables, key=lambda table: table.line))


def parse_triggers(cell: str) -> tuple[tuple[str, ...], tuple[int, ...]]:
    """Split a trigger cell into lower-cased keywords and menu indices.

    When the cell quotes its keywords (``1, "laravel", "php"`` or
    ``contains "debug"``), only the quoted text counts as keywords and bare
    numbers count as menu indices. Otherwise every comma or "or" separated
    token is a trigger.
    """
    keywords: list[str] = []
    indices: list[int] = []

    quoted = [next(group for group in match.groups() if group) for match in QUOTED_TRIGGER_PATTERN.finditer(cell)]
    if quoted:
        unquoted = QUOTED_TRIGGER_PATTERN.sub(" ", cell)
        tokens = [*quoted, *BARE_INDEX_TOKEN_PATTERN.findall(unquoted)]
    else:
        tokens = TRIGGER_SPLIT_PATTERN.split(cell)

    for token in tokens:
        cleaned = token.strip(TRIGGER_STRIP_CHARS).lower()
        if not cleaned:
            continue
        index_match = MENU_INDEX_INPUT_PATTERN.match(cleaned)
        if index_match:
            index = int(index_match.group(1))
            if index not in indices:
                indices.append(index)
        elif cleaned not in keywords:
            keywords.append(cleaned)
    return tuple(keywords), tuple(indices)


def parse_targets(cells: Iterable[str]) -> tuple[str, ...]:
    """Collect document paths from target cells, preserving order.

    Only Markdown paths, Markdown globs and folders (``references/go/``,
    read as ``references/go/*.md``) count. URLs and other code spans in the
    same cells are ignored.
    """
    targets: list[str] = []
    for cell in cells:
        spans = [span.strip() for span in BACKTICK_SPAN_PATTERN.findall(cell)]
        candidates = [span for span in spans if _looks_like_document_path(span)]
        if not candidates:
            prose = URL_PATTERN.sub(" ", BACKTICK_SPAN_PATTERN.sub(" ", cell))
            candidates = BARE_DOCUMENT_PATH_PATTERN.findall(prose)
        for candidate in candidates:
            normalized = normalize_target(candidate)
            if normalized.endswith("/"):
                normalized = f"{normalized}*{DOCUMENT_SUFFIX}"
            if normalized and normalized not in targets:
                targets.append(normalized)
    return tuple(targets)


def normalize_target(target: str) -> str:
    """Normalize a target path to skill-relative POSIX form."""
    normalized = target.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def split_row(text: str) -> list[str]:
    """Split a pipe-table row into stripped cells."""
    inner = text.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|"):
        inner = inner[:-1]
    return [cell.strip() for cell in inner.split("|")]


def _looks_like_document_path(span: str) -> bool:
    if not span or " " in span or "://" in span:
        return False
    return span.endswith(DOCUMENT_SUFFIX) or (span.endswith("/") and span.strip("/") != "")


def _tables_in_region(region: Sequence[DocumentLine]) -> list[RoutingTable]:
    tables: list[RoutingTable] = []
    current_heading = DEFAULT_TABLE_NAME
    block: list[DocumentLine] = []

    for line in region:
        is_row = not line.in_code_block and TABLE_ROW_PATTERN.match(line.text) is not None
        if is_row and block and line.line == block[-1].line + 1:
            block.append(line)
            continue
        if block:
            _append_table(tables, block, current_heading)
            block = []
        heading = heading_of(line)
        if heading is not None:
            current_heading = heading[1]
        if is_row:
            block = [line]

    if block:
        _append_table(tables, block, current_heading)
    return tables


def _append_table(tables: list[RoutingTable], rows: list[DocumentLine], name: str) -> None:
    table = _build_table(rows, name)
    if table is not None:
        tables.append(table)


def _build_table(rows: list[DocumentLine], name: str) -> RoutingTable | None:
    if len(rows) < 2:
        return None
    separator = split_row(rows[1].text)
    if not all(TABLE_SEPARATOR_CELL_PATTERN.match(cell) for cell in separator if cell):
        logger.debug("Ignoring pipe block without separator row at line %d", rows[0].line)
        return None

    rules: list[RoutingRule] = []
    for row in rows[2:]:
        cells = split_row(row.text)
        if len(cells) < 2:
            continue
        keywords, indices = parse_triggers(cells[0])
        targets = parse_targets(cells[1:])
        if not targets or not (keywords or indices):
            logger.debug("Skipping routing row without triggers or targets at line %d", row.line)
            continue
        rules.append(
            RoutingRule(
                keywords=keywords,
                menu_indices=indices,
                targets=targets,
                line=row.line,
                table=name,
            )
        )

    if not rules:
        return None
    return RoutingTable(name=name, rules=tuple(rules), line=rows[0].line)
