"""Human-readable stdout rendering for skills, resolutions and check results."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from skillroute.constants.branding import ASCII_LOGO_LINES, CHECK_SUMMARY_TITLE
from skillroute.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_RESET, LEVEL_COLORS, STATUS_COLORS
from skillroute.constants.routing import STATUS_AMBIGUOUS, STATUS_NO_MATCH
from skillroute.exceptions.validation import ValidationError, sort_errors
from skillroute.model import ChecklistItem, Document, IntakeMenu, RouteResolution, Skill


def _colorize(text: str, color: str, enabled: bool) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{ANSI_RESET}"


def _indent_continuation(text: str, width: int) -> str:
    return text.replace("\n", "\n" + " " * width)


def render_skill_list(skills: Sequence[Skill], *, color: bool = False) -> str:
    """Render one line per skill: name, then description."""
    if not skills:
        return "No skills found."
    width = max(len(skill.name) for skill in skills)
    lines = []
    for skill in sorted(skills, key=lambda item: item.name):
        name = _colorize(skill.name.ljust(width), ANSI_BOLD, color)
        lines.append(f"{name}  {skill.description}".rstrip())
    return "\n".join(lines)


def render_intake(intake: IntakeMenu, *, skill_name: str = "") -> str:
    """Render an intake menu the way a skill presents it."""
    if intake.is_empty():
        return f"Skill {skill_name} has no intake menu." if skill_name else "No intake menu."
    lines = [intake.prompt] if intake.prompt else []
    if lines and intake.options:
        lines.append("")
    lines.extend(f"{option.index}. {option.label}" for option in intake.options)
    return "\n".join(lines)


class ResolutionReporter:
    """Formats a routing resolution, optionally with loaded document bodies."""

    def __init__(
        self,
        resolution: RouteResolution,
        *,
        documents: Sequence[Document] = (),
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        self._resolution = resolution
        self._documents = tuple(documents)
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        sections = [self._render_header()]
        if self._resolution.status == STATUS_NO_MATCH:
            sections.append(self._render_clarification())
        else:
            sections.append(self._render_matches())
            if self._resolution.status == STATUS_AMBIGUOUS:
                sections.append(self._render_ambiguity())
        for document in self._documents:
            sections.append(self._render_document(document))
        return "\n\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._resolution
        status = _colorize(r.status, STATUS_COLORS.get(r.status, ""), self._color)
        return f"Skill     {r.skill}\nResponse  {r.response}\nStatus    {status}"

    def _render_matches(self) -> str:
        lines = ["Documents:"]
        lines.extend(f"  {document}" for document in self._resolution.documents)
        if self._verbose:
            for match in self._resolution.matches:
                for rule in match.rules:
                    triggers = ", ".join(rule.triggers)
                    lines.append(_colorize(f"  [{match.table}] line {rule.line}: {triggers}", ANSI_DIM, self._color))
        return "\n".join(lines)

    def _render_ambiguity(self) -> str:
        lines = ["Several rows matched in one table; ask which one is meant:"]
        for match in self._resolution.matches:
            if not match.ambiguous:
                continue
            for rule in match.rules:
                lines.append(f"  - {match.table}: {', '.join(rule.targets)} (triggers: {', '.join(rule.triggers)})")
        return "\n".join(lines)

    def _render_clarification(self) -> str:
        intake = self._resolution.intake
        if intake.is_empty():
            return "No routing rule matched. Ask the user to clarify what they want to do."
        return "No routing rule matched. Ask again:\n\n" + render_intake(intake)

    def _render_document(self, document: Document) -> str:
        title = _colorize(f"===== {document.path} ({document.kind}) =====", ANSI_BOLD, self._color)
        return f"{title}\n{document.content.rstrip()}"


def render_checklist(items: Sequence[ChecklistItem], *, title: str = "") -> str:
    """Render verification items as a Markdown task list."""
    if not items:
        return f"No verification checklist in {title}." if title else "No verification checklist."
    lines = [f"{title}:"] if title else []
    for item in items:
        if item.command and item.command != item.text:
            lines.append(f"- [ ] {item.text}\n      $ {_indent_continuation(item.command, 8)}")
        elif item.command:
            lines.append(f"- [ ] $ {_indent_continuation(item.command, 8)}")
        else:
            lines.append(f"- [ ] {item.text}")
    return "\n".join(lines)


class CheckReporter:
    """Formats integrity-check results with a summary header."""

    def __init__(
        self,
        errors: Sequence[ValidationError],
        *,
        skill_count: int,
        color: bool = True,
    ) -> None:
        self._errors = sort_errors(list(errors))
        self._skill_count = skill_count
        self._color = color

    def render(self) -> str:
        levels = Counter(error.level for error in self._errors)
        codes = Counter(error.code for error in self._errors)
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {CHECK_SUMMARY_TITLE}",
            "  " + "─" * 38,
            "",
            f"  Skills      {self._skill_count}",
            f"  Errors      {levels.get('error', 0)}",
            f"  Warnings    {levels.get('warning', 0)}",
        ]
        if codes:
            ranked = sorted(codes.items(), key=lambda item: (-item[1], item[0]))
            top = ", ".join(f"{code} ({count})" for code, count in ranked)
            lines.append(f"  By code     {top}")
        if self._errors:
            lines.append("")
            for error in self._errors:
                level = _colorize(error.level.upper().ljust(7), LEVEL_COLORS.get(error.level, ""), self._color)
                lines.append(f"  {level} {error.format()}")
        else:
            lines.extend(["", "  All routing targets resolve."])
        return "\n".join(lines)
