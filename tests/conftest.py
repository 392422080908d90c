"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skillroute.catalog import Workspace, load_workspace
from skillroute.model import Skill


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture workspace: two well-formed skills."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture(scope="session")
def broken_repo_root(fixtures_root: Path) -> Path:
    """Return the fixture workspace with one skill per integrity problem."""
    return fixtures_root / "repos" / "broken"


@pytest.fixture(scope="session")
def basic_workspace(basic_repo_root: Path) -> Workspace:
    return load_workspace(basic_repo_root)


@pytest.fixture(scope="session")
def backend_skill(basic_workspace: Workspace) -> Skill:
    return basic_workspace.get("backend-skill")


@pytest.fixture
def write_skill() -> Callable[..., Path]:
    """Return a helper that writes a SKILL.md plus skill-relative documents."""

    def _write(root: Path, folder: str, text: str, documents: dict[str, str] | None = None) -> Path:
        skill_dir = root / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        skill_file = skill_dir / "SKILL.md"
        skill_file.write_text(text, encoding="utf-8")
        for relative, content in (documents or {}).items():
            target = skill_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return skill_file

    return _write
