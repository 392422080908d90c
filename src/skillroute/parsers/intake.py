"""Intake menu extraction from SKILL.md bodies."""

from __future__ import annotations

from collections.abc import Sequence

from skillroute.constants.parsing import INTAKE_HEADING_KEYWORD, INTAKE_TAG, MENU_OPTION_PATTERN
from skillroute.model import DocumentLine, IntakeMenu, MenuOption
from skillroute.parsers.sections import clean_inline, heading_of, heading_sections, tag_block


def parse_intake(lines: Sequence[DocumentLine]) -> IntakeMenu:
    """Parse the ``<intake>`` block (or an ``Intake`` heading section) into a menu."""
    region = tag_block(lines, INTAKE_TAG)
    if region is None:
        sections = heading_sections(lines, (INTAKE_HEADING_KEYWORD,))
        if not sections:
            return IntakeMenu()
        region = sections[0][1:]

    prompt = ""
    options: list[MenuOption] = []
    seen_indices: set[int] = set()
    for line in region:
        if line.in_code_block or heading_of(line) is not None:
            continue
        match = MENU_OPTION_PATTERN.match(line.text)
        if match:
            index = int(match.group(1))
            if index in seen_indices:
                continue
            seen_indices.add(index)
            options.append(MenuOption(index=index, label=clean_inline(match.group(2))))
            continue
        if not prompt and not options:
            prompt = clean_inline(line.text)

    return IntakeMenu(prompt=prompt, options=tuple(options))
