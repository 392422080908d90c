"""Tests for catalog.json content and its JSON Schema."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from skillroute.catalog import Workspace, load_workspace
from skillroute.constants.reporting import CATALOG_FILENAME, SCHEMA_VERSION
from skillroute.io import file_sha256, load_json_file
from skillroute.reporting import build_catalog, write_catalog

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
CATALOG_SCHEMA_PATH: Path = SCHEMAS_DIR / "catalog.schema.json"


@pytest.fixture(scope="module")
def catalog_schema() -> dict[str, Any]:
    schema = json.loads(CATALOG_SCHEMA_PATH.read_text(encoding="utf-8"))
    jsonschema.Draft202012Validator.check_schema(schema)
    return schema


def test_catalog_matches_schema(basic_workspace: Workspace, catalog_schema: dict[str, Any]) -> None:
    jsonschema.validate(build_catalog(basic_workspace), catalog_schema)


def test_catalog_with_failures_matches_schema(broken_repo_root: Path, catalog_schema: dict[str, Any]) -> None:
    catalog = build_catalog(load_workspace(broken_repo_root))

    jsonschema.validate(catalog, catalog_schema)
    assert [failure["path"] for failure in catalog["failures"]] == ["skills/bad-yaml/SKILL.md"]


def test_catalog_content(basic_workspace: Workspace, basic_repo_root: Path) -> None:
    catalog = build_catalog(basic_workspace)

    assert catalog["schema_version"] == SCHEMA_VERSION
    assert catalog["skill_count"] == 2
    backend = catalog["skills"][0]
    assert backend["name"] == "backend-skill"
    assert backend["path"] == "skills/backend-skill/SKILL.md"
    assert backend["sha256"] == file_sha256(basic_repo_root / "skills" / "backend-skill" / "SKILL.md")
    assert backend["documents"]["template"] == ["templates/controller.md"]
    assert [table["name"] for table in backend["routing"]] == ["Framework Routing", "Task Routing"]
    assert backend["routing"][0]["rules"][0] == {
        "keywords": ["laravel", "php"],
        "menu_indices": [1],
        "targets": ["references/laravel/*.md"],
        "line": 22,
    }
    assert backend["verification"][0]["command"] == "php artisan test"


def test_catalog_is_deterministic(basic_repo_root: Path) -> None:
    assert build_catalog(load_workspace(basic_repo_root)) == build_catalog(load_workspace(basic_repo_root))


def test_write_catalog_is_atomic_and_readable(tmp_path: Path, basic_workspace: Workspace) -> None:
    out_dir = tmp_path / "out" / "nested"

    target = write_catalog(out_dir, basic_workspace)

    assert target == out_dir / CATALOG_FILENAME
    assert load_json_file(target) == build_catalog(basic_workspace)
    assert [item.name for item in out_dir.iterdir()] == [CATALOG_FILENAME]
