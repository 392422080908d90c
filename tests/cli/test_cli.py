"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from skillroute.cli.main import build_parser, main
from skillroute.constants.reporting import CATALOG_FILENAME
from skillroute.exceptions import ConfigError


def test_build_parser_accepts_route_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["route", "--root", str(tmp_path), "--skill", "backend-skill", "go", "--load", "--json"])

    assert args.command == "route"
    assert args.root == tmp_path
    assert args.skill == "backend-skill"
    assert args.response == "go"
    assert args.load is True
    assert args.json is True
    assert args.match_mode is None
    assert args.multi_match is None


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(
            ["route", "-r", ".", "-s", "x", "go", "-l"],
            ["route", "--root", ".", "--skill", "x", "go", "--load"],
            id="route",
        ),
        pytest.param(
            ["list", "-r", ".", "-c", "skillroute.yaml", "-v"],
            ["list", "--root", ".", "--config", "skillroute.yaml", "--verbose"],
            id="config-and-verbose",
        ),
        pytest.param(
            ["checklist", "-r", ".", "-s", "x", "-d", "workflows/a.md"],
            ["checklist", "--root", ".", "--skill", "x", "--document", "workflows/a.md"],
            id="checklist-document",
        ),
        pytest.param(
            ["index", "-r", ".", "-o", "out"],
            ["index", "--root", ".", "--output-dir", "out"],
            id="index-output-dir",
        ),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    """Short flags produce the same parsed namespace as long-form flags."""
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


@pytest.mark.parametrize(
    "argv",
    [
        pytest.param(["route", "-r", ".", "-s", "x", "go", "--multi-match", "random"], id="bad-multi-match"),
        pytest.param(["route", "-r", ".", "-s", "x", "go", "--match-mode", "fuzzy"], id="bad-match-mode"),
        pytest.param(["check", "-r", ".", "--fail-on", "info"], id="bad-fail-on"),
        pytest.param(["index", "-r", "."], id="index-requires-output-dir"),
        pytest.param(["intake", "-r", "."], id="intake-requires-skill"),
    ],
)
def test_parser_rejects_invalid_arguments(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(argv)


def test_check_fail_on_defaults_to_error(tmp_path: Path) -> None:
    assert build_parser().parse_args(["check", "-r", str(tmp_path)]).fail_on == "error"


def test_list_prints_skills(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["list", "-r", str(basic_repo_root), "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "backend-skill" in out
    assert "docs-writer" in out


def test_intake_prints_menu(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["intake", "-r", str(basic_repo_root), "-s", "backend-skill"])

    assert exit_code == 0
    assert "3. Node.js" in capsys.readouterr().out


def test_route_text_output(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "debug", "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Status    matched" in out
    assert "workflows/debug-backend.md" in out


def test_route_json_output(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "1", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["status"] == "matched"
    assert payload["documents"] == ["references/laravel/*.md"]
    assert payload["matches"][0]["table"] == "Framework Routing"
    assert "loaded" not in payload


def test_route_json_with_load(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "1", "--json", "--load"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert [item["path"] for item in payload["loaded"]] == [
        "references/laravel/eloquent.md",
        "references/laravel/routing.md",
    ]


def test_route_load_prints_document_bodies(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "go", "--load", "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "===== references/go/patterns.md (reference) =====" in out
    assert "Return errors, do not panic." in out


def test_route_no_match_exits_zero(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "xyzzy", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["status"] == "no_match"
    assert len(payload["intake"]["options"]) == 4


def test_route_multi_match_override(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["route", "-r", str(basic_repo_root), "-s", "backend-skill", "optimize", "--json", "--multi-match", "first"]

    exit_code = main(argv)

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["status"] == "matched"
    assert payload["documents"] == ["workflows/optimize-database.md"]


def test_route_uses_config_policy(tmp_path: Path, basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "skillroute.yaml"
    config_path.write_text("multi_match: all\n", encoding="utf-8")

    exit_code = main(
        ["route", "-r", str(basic_repo_root), "-c", str(config_path), "-s", "backend-skill", "optimize", "--json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["status"] == "matched"
    assert len(payload["documents"]) == 2


def test_route_empty_response_exits_one(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(basic_repo_root), "-s", "backend-skill", "   "])

    assert exit_code == 1
    assert "must not be empty" in capsys.readouterr().err


def test_unknown_skill_exits_one(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["intake", "-r", str(basic_repo_root), "-s", "backend-skil"])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Unknown skill" in err
    assert "backend-skill" in err


def test_route_load_missing_document_exits_one(broken_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["route", "-r", str(broken_repo_root), "-s", "broken-routes", "missing", "--load"])

    assert exit_code == 1
    assert "matches no file" in capsys.readouterr().err


def test_checklist_for_skill(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["checklist", "-r", str(basic_repo_root), "-s", "backend-skill"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "backend-skill:" in out
    assert "$ php artisan test" in out


def test_checklist_for_document(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["checklist", "-r", str(basic_repo_root), "-s", "docs-writer", "-d", "workflows/review.md"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "- [ ] Headings are sentence case" in out
    assert "$ skillroute check -r ." in out


def test_index_writes_catalog(basic_repo_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["index", "-r", str(basic_repo_root), "-o", str(tmp_path)])

    assert exit_code == 0
    catalog = json.loads((tmp_path / CATALOG_FILENAME).read_text(encoding="utf-8"))
    assert catalog["skill_count"] == 2
    assert str(tmp_path / CATALOG_FILENAME) in capsys.readouterr().out


def test_missing_root_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["list", "-r", str(tmp_path / "missing")])

    assert exit_code == 2
    assert "CFG010" in capsys.readouterr().err


def test_invalid_config_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "skillroute.yaml").write_text("match_mode: fuzzy\n", encoding="utf-8")

    exit_code = main(["list", "-r", str(tmp_path)])

    assert exit_code == 2
    assert "CFG006" in capsys.readouterr().err


def test_config_error_during_command_exits_two(basic_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("skillroute.cli.handlers.load_workspace", side_effect=ConfigError("boom")):
        exit_code = main(["list", "-r", str(basic_repo_root)])

    assert exit_code == 2
    assert "Configuration error: boom" in capsys.readouterr().err


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["validate-config", "-r", str(tmp_path)])

    assert exit_code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "skillroute.yaml").write_text("match_mod: word\n", encoding="utf-8")

    exit_code = main(["validate-config", "-r", str(tmp_path)])

    err = capsys.readouterr().err
    assert exit_code == 2
    assert "[CFG004]" in err
    assert "did you mean `match_mode`?" in err


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["validate-config", "-r", str(tmp_path), "-c", str(tmp_path / "nope.yaml")])

    assert exit_code == 2
    assert "CFG001" in capsys.readouterr().err
