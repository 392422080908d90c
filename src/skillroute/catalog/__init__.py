"""Skill discovery, workspace loading and document access."""

from __future__ import annotations

from .documents import expand_target, expand_targets, load_document, load_routed_documents
from .workspace import SkillLoadFailure, Workspace, build_skill, load_skill, load_workspace

__all__ = [
    "SkillLoadFailure",
    "Workspace",
    "build_skill",
    "expand_target",
    "expand_targets",
    "load_document",
    "load_routed_documents",
    "load_skill",
    "load_workspace",
]
