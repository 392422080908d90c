"""Cross-document references inside a skill folder."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from skillroute.constants.parsing import EXTERNAL_LINK_PREFIXES, INLINE_CODE_PATTERN, MARKDOWN_LINK_PATTERN
from skillroute.model import DocumentLine, Skill
from skillroute.parsers import markdown_lines


def relative_links(lines: tuple[DocumentLine, ...]) -> list[tuple[int, str]]:
    """Return ``(line, target)`` for relative Markdown links outside code blocks."""
    links: list[tuple[int, str]] = []
    for line in lines:
        if line.in_code_block:
            continue
        for raw in MARKDOWN_LINK_PATTERN.findall(line.text):
            target = raw.split("#", 1)[0]
            if not target or raw.startswith(EXTERNAL_LINK_PREFIXES) or "://" in raw:
                continue
            links.append((line.line, target))
    return links


def resolve_reference(skill: Skill, document_path: str, target: str) -> str | None:
    """Resolve a link from *document_path* to an existing skill-relative file.

    Targets are tried relative to the linking document first, then relative
    to the skill folder. Targets outside the skill folder never resolve.
    """
    base = PurePosixPath(document_path).parent
    for candidate in (base / target, PurePosixPath(target)):
        resolved = _within_skill(skill.directory, candidate)
        if resolved is not None:
            return resolved
    return None


def referenced_documents(skill: Skill, document_path: str, text: str) -> set[str]:
    """Return skill-relative files a document points at via links or inline code paths."""
    lines = markdown_lines(text.splitlines())
    targets = [target for _, target in relative_links(lines)]
    for line in lines:
        if line.in_code_block:
            continue
        targets.extend(span for span in INLINE_CODE_PATTERN.findall(line.text) if span.endswith(".md"))

    found: set[str] = set()
    for target in targets:
        resolved = resolve_reference(skill, document_path, target.strip())
        if resolved is not None:
            found.add(resolved)
    return found


def _within_skill(skill_dir: Path, candidate: PurePosixPath) -> str | None:
    path = (skill_dir / candidate).resolve()
    try:
        relative = path.relative_to(skill_dir)
    except ValueError:
        return None
    if not path.is_file():
        return None
    return relative.as_posix()
