"""Load every skill under a workspace root into immutable values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from skillroute.catalog.discovery import (
    derive_skill_name,
    discover_documents,
    discover_skill_files,
    sanitize_skill_name,
    stable_path_key,
)
from skillroute.config import SkillrouteConfig, load_config, suggest_name
from skillroute.exceptions import SkillNotFoundError, SkillParseError
from skillroute.model import ParsedSkillDocument, Skill
from skillroute.parsers import (
    frontmatter_string,
    parse_checklist,
    parse_intake,
    parse_routing_tables,
    parse_skill_markdown_file,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillLoadFailure:
    """A SKILL.md that could not be parsed."""

    path: Path
    message: str


@dataclass(frozen=True)
class Workspace:
    """All skills found under one root, plus the files that failed to load."""

    root: Path
    config: SkillrouteConfig
    skills: tuple[Skill, ...]
    failures: tuple[SkillLoadFailure, ...] = ()

    def names(self) -> tuple[str, ...]:
        return tuple(sorted({skill.name for skill in self.skills}))

    def get(self, name: str) -> Skill:
        """Look up a skill by declared name or folder name.

        Raises:
            SkillNotFoundError: when no skill, or more than one, answers to *name*.
        """
        wanted = sanitize_skill_name(name)
        by_name = [skill for skill in self.skills if skill.name == wanted]
        candidates = by_name or [
            skill for skill in self.skills if sanitize_skill_name(skill.folder_name) == wanted
        ]
        if len(candidates) == 1:
            return candidates[0]
        if len(candidates) > 1:
            locations = ", ".join(stable_path_key(skill.skill_file, self.root) for skill in candidates)
            raise SkillNotFoundError(f"Skill name {name!r} is ambiguous: {locations}")

        known = self.names() + tuple(sanitize_skill_name(skill.folder_name) for skill in self.skills)
        hint = suggest_name(wanted, tuple(sorted(set(known))))
        message = f"Unknown skill {name!r}"
        if hint:
            message = f"{message}; {hint}"
        raise SkillNotFoundError(message)


def load_workspace(
    root: Path,
    config_path: Path | None = None,
    *,
    config: SkillrouteConfig | None = None,
) -> Workspace:
    """Discover and load all skills under *root*.

    A skill that fails to parse is logged and recorded as a failure; the
    remaining skills still load.
    """
    root = root.resolve()
    resolved_config = config if config is not None else load_config(root, config_path)
    skill_files = discover_skill_files(root, resolved_config.skill_globs, resolved_config.max_file_mb)

    skills: list[Skill] = []
    failures: list[SkillLoadFailure] = []
    for path in skill_files:
        try:
            skills.append(load_skill(path, resolved_config))
        except SkillParseError as exc:
            logger.warning("Skipping unparseable skill %s: %s", stable_path_key(path, root), exc)
            failures.append(SkillLoadFailure(path=path, message=str(exc)))

    logger.info("Loaded %d skills from %s", len(skills), root)
    return Workspace(root=root, config=resolved_config, skills=tuple(skills), failures=tuple(failures))


def load_skill(path: Path, config: SkillrouteConfig) -> Skill:
    """Parse one SKILL.md and inventory its folder."""
    parsed = parse_skill_markdown_file(path)
    return build_skill(parsed, config)


def build_skill(parsed: ParsedSkillDocument, config: SkillrouteConfig) -> Skill:
    """Build a :class:`Skill` from an already parsed SKILL.md."""
    skill_file = parsed.file_path.resolve()
    directory = skill_file.parent
    declared_name = frontmatter_string(parsed.frontmatter, "name")
    return Skill(
        name=derive_skill_name(skill_file, declared_name=declared_name),
        description=frontmatter_string(parsed.frontmatter, "description") or "",
        directory=directory,
        skill_file=skill_file,
        intake=parse_intake(parsed.lines),
        routing_tables=parse_routing_tables(parsed.lines, config.routing_headings),
        verification=parse_checklist(parsed.lines),
        documents=discover_documents(directory, config.document_dirs),
        frontmatter=parsed.frontmatter,
    )
