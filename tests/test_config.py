"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillroute.config import SkillrouteConfig, load_config
from skillroute.constants.config import DEFAULT_DOCUMENT_DIRS, DEFAULT_SKILL_GLOBS
from skillroute.constants.routing import (
    DEFAULT_MATCH_MODE,
    DEFAULT_MULTI_MATCH,
    VALID_MATCH_MODES,
    VALID_MULTI_MATCH_POLICIES,
)
from skillroute.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == SkillrouteConfig()
    assert loaded.skill_globs == DEFAULT_SKILL_GLOBS
    assert loaded.max_file_mb == 2
    assert loaded.match_mode == "word"
    assert loaded.multi_match == "flag"
    assert loaded.routing_headings == ("routing",)
    assert loaded.document_dirs == DEFAULT_DOCUMENT_DIRS
    assert loaded.check_orphans is True


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "skillroute.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == SkillrouteConfig()


def test_routing_defaults_are_valid_choices() -> None:
    config = SkillrouteConfig()

    assert config.match_mode == DEFAULT_MATCH_MODE
    assert config.multi_match == DEFAULT_MULTI_MATCH
    assert DEFAULT_MATCH_MODE in VALID_MATCH_MODES
    assert DEFAULT_MULTI_MATCH in VALID_MULTI_MATCH_POLICIES


def test_load_config_reads_overrides(tmp_path: Path) -> None:
    (tmp_path / "skillroute.yaml").write_text(
        "\n".join(
            [
                "skill_globs: ['skills/**/SKILL.md']",
                "max_file_mb: 5",
                "match_mode: substring",
                "multi_match: all",
                "routing_headings: ['Routing', ' Dispatch ']",
                "document_dirs:",
                "  reference: guides/",
                "check_orphans: false",
            ]
        ),
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.skill_globs == ("skills/**/SKILL.md",)
    assert loaded.max_file_mb == 5
    assert loaded.match_mode == "substring"
    assert loaded.multi_match == "all"
    assert loaded.routing_headings == ("routing", "dispatch")
    assert loaded.document_dirs == {"reference": "guides", "workflow": "workflows", "template": "templates"}
    assert loaded.check_orphans is False


def test_explicit_config_path(tmp_path: Path) -> None:
    config_path = tmp_path / "elsewhere.yaml"
    config_path.write_text("multi_match: first\n", encoding="utf-8")

    assert load_config(tmp_path, config_path).multi_match == "first"


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("max_file_mb: true\n", "max_file_mb"),
        ("max_file_mb: 0\n", "max_file_mb"),
        ("match_mode: fuzzy\n", "match_mode"),
        ("multi_match: random\n", "multi_match"),
        ("check_orphans: maybe\n", "check_orphans"),
        ("skill_globs: 123\n", "skill_globs"),
        ("skill_globs: ['  ']\n", "skill_globs"),
        ("routing_headings: [1, 2]\n", "routing_headings"),
        ("document_dirs: [references]\n", "document_dirs"),
        ("document_dirs:\n  examples: ex\n", "document_dirs"),
        ("document_dirs:\n  reference: a/b\n", "document_dirs.reference"),
        ("- a\n- b\n", "YAML mapping"),
        ("key: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "bool-max-file-mb",
        "zero-max-file-mb",
        "bad-match-mode",
        "bad-multi-match",
        "non-bool-orphans",
        "non-list-globs",
        "blank-globs",
        "non-string-headings",
        "document-dirs-not-mapping",
        "unknown-document-kind",
        "nested-document-folder",
        "non-mapping",
        "invalid-yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    (tmp_path / "skillroute.yaml").write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path)


def test_kind_for_classifies_by_top_level_folder() -> None:
    config = SkillrouteConfig()

    assert config.kind_for("references/go/patterns.md") == "reference"
    assert config.kind_for("workflows/debug.md") == "workflow"
    assert config.kind_for("templates/page.md") == "template"
    assert config.kind_for("NOTES.md") == "other"


def test_config_error_is_value_error() -> None:
    assert issubclass(ConfigError, ValueError)
