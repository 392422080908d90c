"""Tests for config validation (error codes, messages, ordering) and preflight."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillroute.config import suggest_name, validate_config_file
from skillroute.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
    CFG010,
)
from skillroute.exceptions.validation import ValidationError, format_errors, sort_errors
from skillroute.validation import preflight_validate


def _write_config(tmp_path: Path, content: str) -> Path:
    cfg = tmp_path / "skillroute.yaml"
    cfg.write_text(content, encoding="utf-8")
    return cfg


def test_validation_error_format_with_all_fields() -> None:
    err = ValidationError(
        code="CFG004",
        path="/repo/skillroute.yaml",
        field="match_mod",
        message="unknown key `match_mod`",
        hint="did you mean `match_mode`?",
        line=3,
    )

    assert err.format() == "[CFG004] /repo/skillroute.yaml:3 unknown key `match_mod` (did you mean `match_mode`?)"


def test_validation_error_format_without_optional_fields() -> None:
    err = ValidationError(
        code="CFG003",
        path="/repo/skillroute.yaml",
        field="",
        message="config must be a YAML mapping, got list",
    )

    assert err.format() == "[CFG003] /repo/skillroute.yaml config must be a YAML mapping, got list"
    assert err.to_dict()["level"] == "error"


def test_sort_errors_is_deterministic() -> None:
    errs = [
        ValidationError(code="CFG005", path="/b.yaml", field="x", message="m"),
        ValidationError(code="CFG004", path="/a.yaml", field="y", message="m"),
        ValidationError(code="CFG004", path="/a.yaml", field="x", message="m"),
    ]

    sorted_errs = sort_errors(errs)

    assert [e.code for e in sorted_errs] == ["CFG004", "CFG004", "CFG005"]
    assert [e.field for e in sorted_errs] == ["x", "y", "x"]


def test_format_errors_combines_sorted_lines() -> None:
    errs = [
        ValidationError(code="CFG005", path="/b.yaml", field="x", message="bad type"),
        ValidationError(code="CFG004", path="/a.yaml", field="y", message="unknown"),
    ]

    lines = format_errors(errs).strip().split("\n")

    assert len(lines) == 2
    assert lines[0].startswith("[CFG004]")
    assert lines[1].startswith("[CFG005]")


@pytest.mark.parametrize(
    ("unknown", "expected_in_hint"),
    [
        pytest.param("multi_matc", "multi_match", id="close-match"),
        pytest.param("zzzzz_totally_wrong", "", id="no-match"),
    ],
)
def test_suggest_name(unknown: str, expected_in_hint: str) -> None:
    hint = suggest_name(unknown, ALLOWED_CONFIG_KEYS)
    if expected_in_hint:
        assert expected_in_hint in hint
    else:
        assert hint == ""


def test_missing_default_config_returns_no_errors(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_returns_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "does_not_exist.yaml", config_explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_valid_config_returns_no_errors(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "match_mode: word\nmulti_match: first\nmax_file_mb: 3\ndocument_dirs:\n  template: tpl\ncheck_orphans: false\n",
    )

    assert validate_config_file(tmp_path) == []


@pytest.mark.parametrize(
    ("yaml_content", "expected_code"),
    [
        pytest.param(":\n  - :\n  bad: [", CFG002, id="invalid-yaml"),
        pytest.param("- item1\n- item2\n", CFG003, id="non-mapping"),
        pytest.param("match_mode: fuzzy\n", CFG006, id="invalid-match-mode"),
        pytest.param("multi_match: 3\n", CFG006, id="invalid-multi-match"),
        pytest.param("max_file_mb: true\n", CFG005, id="bool-max-file-mb"),
        pytest.param("max_file_mb: -1\n", CFG007, id="negative-max-file-mb"),
        pytest.param("check_orphans: maybe\n", CFG005, id="non-bool-orphans"),
        pytest.param("skill_globs: 123\n", CFG005, id="non-list-globs"),
        pytest.param("skill_globs: ['']\n", CFG007, id="empty-globs"),
        pytest.param("document_dirs: notamap\n", CFG009, id="document-dirs-not-mapping"),
        pytest.param("document_dirs:\n  reference: a/b\n", CFG005, id="nested-document-folder"),
    ],
)
def test_config_file_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_code: str) -> None:
    _write_config(tmp_path, yaml_content)

    errors = validate_config_file(tmp_path)

    assert any(e.code == expected_code for e in errors)


def test_unknown_key_includes_typo_suggestion(tmp_path: Path) -> None:
    _write_config(tmp_path, "routing_heading: [routing]\n")

    cfg004 = [e for e in validate_config_file(tmp_path) if e.code == CFG004]

    assert len(cfg004) == 1
    assert cfg004[0].field == "routing_heading"
    assert "routing_headings" in cfg004[0].hint


def test_unknown_document_kind_returns_cfg004(tmp_path: Path) -> None:
    _write_config(tmp_path, "document_dirs:\n  workflw: flows\n")

    errors = validate_config_file(tmp_path)

    assert any(e.code == CFG004 and e.field == "document_dirs.workflw" and "workflow" in e.hint for e in errors)


def test_all_problems_are_collected(tmp_path: Path) -> None:
    _write_config(tmp_path, "match_mode: fuzzy\nmax_file_mb: 0\nextra: 1\n")

    codes = sorted(e.code for e in validate_config_file(tmp_path))

    assert codes == [CFG004, CFG006, CFG007]


def test_preflight_missing_root_returns_cfg010(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "nope")

    assert [e.code for e in errors] == [CFG010]


def test_preflight_reports_config_errors_sorted(tmp_path: Path) -> None:
    _write_config(tmp_path, "multi_match: maybe\nunknown_key: 1\n")

    errors = preflight_validate(tmp_path)

    assert [e.code for e in errors] == [CFG004, CFG006]


def test_preflight_valid_workspace(basic_repo_root: Path) -> None:
    assert preflight_validate(basic_repo_root) == []
