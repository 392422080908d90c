"""Collect-all integrity checks for skill folders.

Every check returns :class:`ValidationError` records instead of raising, so
one run reports every broken route, schema problem and orphaned document.
"""

from __future__ import annotations

import logging
from collections import deque

from jsonschema import Draft202012Validator

from skillroute.catalog import Workspace, expand_target
from skillroute.catalog.discovery import find_duplicate_names, stable_path_key
from skillroute.catalog.documents import escapes_skill_dir
from skillroute.config import SkillrouteConfig
from skillroute.constants.frontmatter import FRONTMATTER_SCHEMA
from skillroute.constants.validation import (
    LEVEL_WARNING,
    SKL001,
    SKL002,
    SKL003,
    SKL004,
    SKL005,
    SKL006,
    SKL007,
    SKL008,
    SKL009,
    SKL010,
    SKL011,
)
from skillroute.exceptions.validation import ValidationError, sort_errors
from skillroute.integrity.links import referenced_documents, relative_links, resolve_reference
from skillroute.model import Skill
from skillroute.parsers import markdown_lines
from skillroute.types import IssueLevel
from skillroute.utils import names_match

logger = logging.getLogger(__name__)

_FRONTMATTER_VALIDATOR = Draft202012Validator(FRONTMATTER_SCHEMA)


def check_workspace(workspace: Workspace) -> list[ValidationError]:
    """Run every integrity check over a loaded workspace."""
    errors: list[ValidationError] = []
    for failure in workspace.failures:
        errors.append(
            ValidationError(
                code=SKL001,
                path=stable_path_key(failure.path, workspace.root),
                field="",
                message=failure.message,
            )
        )

    duplicates = find_duplicate_names((skill.skill_file, skill.name) for skill in workspace.skills)
    for name, paths in duplicates.items():
        for path in paths:
            errors.append(
                ValidationError(
                    code=SKL009,
                    path=stable_path_key(path, workspace.root),
                    field="name",
                    message=f"skill name `{name}` is used by {len(paths)} skills",
                    hint="give each skill a unique frontmatter name",
                )
            )

    for skill in workspace.skills:
        skill_path = stable_path_key(skill.skill_file, workspace.root)
        errors.extend(check_skill(skill, workspace.config, skill_path=skill_path))

    logger.info("Checked %d skills: %d issues", len(workspace.skills), len(errors))
    return sort_errors(errors)


def check_skill(skill: Skill, config: SkillrouteConfig, *, skill_path: str | None = None) -> list[ValidationError]:
    """Run the per-skill checks: frontmatter, routes, menu indices, links, orphans."""
    path = skill_path or skill.skill_file.as_posix()
    errors: list[ValidationError] = []
    errors.extend(_check_frontmatter(skill, path))
    errors.extend(_check_routes(skill, path))
    errors.extend(_check_overlaps(skill, path))
    errors.extend(_check_menu_indices(skill, path))
    errors.extend(_check_links(skill, path))
    if config.check_orphans:
        errors.extend(_check_orphans(skill, path))
    return errors


def exceeds_threshold(errors: list[ValidationError], fail_on: IssueLevel) -> bool:
    """Whether any issue is at or above the *fail_on* level."""
    return any(error.at_least(fail_on) for error in errors)


def _check_frontmatter(skill: Skill, path: str) -> list[ValidationError]:
    if skill.frontmatter is None:
        return [
            ValidationError(
                code=SKL002,
                path=path,
                field="frontmatter",
                message="SKILL.md has no YAML frontmatter",
                hint="add `name` and `description` between `---` lines",
                line=1,
            )
        ]

    errors: list[ValidationError] = []
    for error in sorted(_FRONTMATTER_VALIDATOR.iter_errors(skill.frontmatter), key=lambda e: str(e.message)):
        field = ".".join(str(part) for part in error.path)
        if not field and error.validator == "required":
            field = next((key for key in error.validator_value if f"'{key}'" in error.message), "")
        errors.append(
            ValidationError(
                code=SKL002,
                path=path,
                field=field or "frontmatter",
                message=f"invalid frontmatter: {error.message}",
                line=1,
            )
        )

    declared = skill.frontmatter.get("name")
    if isinstance(declared, str) and declared.strip():
        if not names_match(declared, skill.folder_name):
            errors.append(
                _warning(
                    SKL003,
                    path,
                    "name",
                    f"frontmatter name `{declared.strip()}` differs from folder `{skill.folder_name}`",
                    line=1,
                )
            )
    return errors


def _check_routes(skill: Skill, path: str) -> list[ValidationError]:
    if not skill.routing_tables:
        return [_warning(SKL011, path, "routing", "skill has no routing table")]

    errors: list[ValidationError] = []
    for rule in skill.rules:
        for target in rule.targets:
            if escapes_skill_dir(target):
                errors.append(
                    ValidationError(
                        code=SKL005,
                        path=path,
                        field=f"routing.{rule.table}",
                        message=f"routing target `{target}` escapes the skill folder",
                        line=rule.line,
                    )
                )
                continue
            if not expand_target(skill, target):
                errors.append(
                    ValidationError(
                        code=SKL004,
                        path=path,
                        field=f"routing.{rule.table}",
                        message=f"routing target `{target}` matches no file",
                        hint="create the document or fix the path",
                        line=rule.line,
                    )
                )
    return errors


def _check_overlaps(skill: Skill, path: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for table in skill.routing_tables:
        first_seen: dict[str, int] = {}
        for rule in table.rules:
            for trigger in rule.triggers:
                if trigger not in first_seen:
                    first_seen[trigger] = rule.line
                    continue
                if first_seen[trigger] == rule.line:
                    continue
                errors.append(
                    _warning(
                        SKL006,
                        path,
                        f"routing.{table.name}",
                        f"trigger `{trigger}` also routes from line {first_seen[trigger]} in `{table.name}`",
                        line=rule.line,
                        hint="responses containing it resolve as ambiguous under the default policy",
                    )
                )
    return errors


def _check_menu_indices(skill: Skill, path: str) -> list[ValidationError]:
    known = {option.index for option in skill.intake.options}
    errors: list[ValidationError] = []
    for rule in skill.rules:
        for index in rule.menu_indices:
            if index not in known:
                errors.append(
                    _warning(
                        SKL007,
                        path,
                        f"routing.{rule.table}",
                        f"menu index {index} has no intake option",
                        line=rule.line,
                    )
                )
    return errors


def _check_links(skill: Skill, path: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    sources: list[tuple[str, str]] = [("SKILL.md", path)]
    sources.extend((relative, f"{_skill_prefix(path)}{relative}") for relative in skill.all_documents())
    for relative, display in sources:
        text = _read_text(skill, relative)
        if text is None:
            continue
        for line, target in relative_links(markdown_lines(text.splitlines())):
            if resolve_reference(skill, relative, target) is None and not _outside_link_exists(skill, relative, target):
                errors.append(
                    _warning(SKL010, display, "link", f"link target `{target}` does not exist", line=line)
                )
    return errors


def _check_orphans(skill: Skill, path: str) -> list[ValidationError]:
    reachable: set[str] = set()
    for rule in skill.rules:
        for target in rule.targets:
            if not escapes_skill_dir(target):
                reachable.update(expand_target(skill, target))

    skill_text = _read_text(skill, "SKILL.md") or ""
    reachable.update(referenced_documents(skill, "SKILL.md", skill_text))

    queue = deque(sorted(reachable))
    while queue:
        current = queue.popleft()
        text = _read_text(skill, current)
        if text is None:
            continue
        for linked in sorted(referenced_documents(skill, current, text) - reachable):
            reachable.add(linked)
            queue.append(linked)

    errors: list[ValidationError] = []
    for kind in sorted(skill.documents):
        if kind == "other":
            continue
        for relative in skill.documents[kind]:
            if relative not in reachable:
                errors.append(
                    _warning(
                        SKL008,
                        f"{_skill_prefix(path)}{relative}",
                        kind,
                        f"{kind} document is not reachable from any routing rule or link",
                    )
                )
    return errors


def _read_text(skill: Skill, relative: str) -> str | None:
    try:
        return (skill.directory / relative).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s in %s: %s", relative, skill.name, exc)
        return None


def _outside_link_exists(skill: Skill, document_path: str, target: str) -> bool:
    """Links may point at sibling skills; those only need to exist."""
    base = (skill.directory / document_path).parent
    return (base / target).resolve().exists()


def _skill_prefix(skill_path: str) -> str:
    head, _, _ = skill_path.rpartition("/")
    return f"{head}/" if head else ""


def _warning(
    code: str,
    path: str,
    field: str,
    message: str,
    *,
    line: int | None = None,
    hint: str = "",
) -> ValidationError:
    return ValidationError(
        code=code,
        path=path,
        field=field,
        message=message,
        hint=hint,
        line=line,
        level=LEVEL_WARNING,
    )
