"""Catalog writer: a deterministic JSON index of every skill in a workspace."""

from __future__ import annotations

from pathlib import Path

from skillroute.catalog import Workspace
from skillroute.catalog.discovery import stable_path_key
from skillroute.constants.reporting import CATALOG_FILENAME, SCHEMA_VERSION
from skillroute.io import file_sha256, write_json_atomic
from skillroute.model import Skill
from skillroute.types import JsonObject


def build_catalog(workspace: Workspace) -> JsonObject:
    """Build the catalog payload for a loaded workspace."""
    skills = sorted(
        workspace.skills,
        key=lambda skill: (skill.name, stable_path_key(skill.skill_file, workspace.root)),
    )
    return {
        "schema_version": SCHEMA_VERSION,
        "skill_count": len(skills),
        "skills": [_skill_entry(skill, workspace.root) for skill in skills],
        "failures": [
            {"path": stable_path_key(failure.path, workspace.root), "message": failure.message}
            for failure in workspace.failures
        ],
    }


def write_catalog(out_dir: Path, workspace: Workspace) -> Path:
    """Write ``catalog.json`` into *out_dir* atomically and return its path."""
    target = out_dir / CATALOG_FILENAME
    write_json_atomic(path=target, payload=build_catalog(workspace))
    return target


def _skill_entry(skill: Skill, root: Path) -> JsonObject:
    return {
        "name": skill.name,
        "description": skill.description,
        "path": stable_path_key(skill.skill_file, root),
        "sha256": file_sha256(skill.skill_file),
        "documents": {kind: list(paths) for kind, paths in sorted(skill.documents.items())},
        "intake": skill.intake.to_dict(),
        "routing": [table.to_dict() for table in skill.routing_tables],
        "verification": [
            {"text": item.text, "command": item.command, "line": item.line} for item in skill.verification
        ],
    }
