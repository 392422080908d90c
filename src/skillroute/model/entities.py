"""Frozen domain entities for skills, routing tables and resolutions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillroute.types import DocumentKind, RouteStatus


@dataclass(frozen=True)
class DocumentLine:
    """One non-empty body line of a Markdown file."""

    line: int
    text: str
    in_code_block: bool


@dataclass(frozen=True)
class ParsedSkillDocument:
    """Raw parse of a SKILL.md file: frontmatter plus numbered body lines."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    body: str
    body_start_line: int
    lines: tuple[DocumentLine, ...]


@dataclass(frozen=True)
class MenuOption:
    """A numbered intake menu choice."""

    index: int
    label: str


@dataclass(frozen=True)
class IntakeMenu:
    """The question a skill asks before routing, with its numbered options."""

    prompt: str = ""
    options: tuple[MenuOption, ...] = ()

    def option(self, index: int) -> MenuOption | None:
        for option in self.options:
            if option.index == index:
                return option
        return None

    def is_empty(self) -> bool:
        return not self.prompt and not self.options

    def to_dict(self) -> dict[str, Any]:
        return {
            "prompt": self.prompt,
            "options": [{"index": option.index, "label": option.label} for option in self.options],
        }


@dataclass(frozen=True)
class RoutingRule:
    """A routing table row: trigger keywords and menu indices mapped to document targets."""

    keywords: tuple[str, ...]
    menu_indices: tuple[int, ...]
    targets: tuple[str, ...]
    line: int
    table: str = ""

    @property
    def triggers(self) -> tuple[str, ...]:
        """All triggers in display form, menu indices first."""
        return tuple(str(index) for index in self.menu_indices) + self.keywords

    def to_dict(self) -> dict[str, Any]:
        return {
            "keywords": list(self.keywords),
            "menu_indices": list(self.menu_indices),
            "targets": list(self.targets),
            "line": self.line,
        }


@dataclass(frozen=True)
class RoutingTable:
    """An ordered routing table parsed from one Markdown pipe table."""

    name: str
    rules: tuple[RoutingRule, ...]
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "line": self.line,
            "rules": [rule.to_dict() for rule in self.rules],
        }


@dataclass(frozen=True)
class ChecklistItem:
    """One verification step: a manual check and the shell command it names, if any."""

    text: str
    command: str | None = None
    line: int | None = None


@dataclass(frozen=True)
class Document:
    """A Markdown reference, workflow or template loaded from a skill folder."""

    path: str
    kind: DocumentKind
    content: str
    section_tags: tuple[str, ...] = ()
    checklist: tuple[ChecklistItem, ...] = ()

    def section(self, tag: str) -> str | None:
        """Return the text between ``<tag>`` and ``</tag>``, or None."""
        opener = f"<{tag}>"
        closer = f"</{tag}>"
        start = self.content.find(opener)
        if start == -1:
            return None
        start += len(opener)
        end = self.content.find(closer, start)
        if end == -1:
            return None
        return self.content[start:end].strip()


@dataclass(frozen=True)
class Skill:
    """A resolved skill folder with its intake, routing tables and documents."""

    name: str
    description: str
    directory: Path
    skill_file: Path
    intake: IntakeMenu = IntakeMenu()
    routing_tables: tuple[RoutingTable, ...] = ()
    verification: tuple[ChecklistItem, ...] = ()
    documents: dict[DocumentKind, tuple[str, ...]] = field(default_factory=dict)
    frontmatter: dict[str, Any] | None = None

    @property
    def folder_name(self) -> str:
        return self.directory.name

    @property
    def rules(self) -> tuple[RoutingRule, ...]:
        return tuple(rule for table in self.routing_tables for rule in table.rules)

    def all_documents(self) -> tuple[str, ...]:
        return tuple(path for kind in sorted(self.documents) for path in self.documents[kind])


@dataclass(frozen=True)
class RouteMatch:
    """Routing rules that fired in one table."""

    table: str
    rules: tuple[RoutingRule, ...]

    @property
    def ambiguous(self) -> bool:
        return len(self.rules) > 1


@dataclass(frozen=True)
class RouteResolution:
    """Outcome of resolving one response against a skill's routing tables."""

    skill: str
    response: str
    status: RouteStatus
    matches: tuple[RouteMatch, ...] = ()
    documents: tuple[str, ...] = ()
    intake: IntakeMenu = IntakeMenu()

    @property
    def matched(self) -> bool:
        return bool(self.documents)

    def to_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill,
            "response": self.response,
            "status": self.status,
            "documents": list(self.documents),
            "matches": [
                {"table": match.table, "rules": [rule.to_dict() for rule in match.rules]} for match in self.matches
            ],
            "intake": self.intake.to_dict(),
        }
