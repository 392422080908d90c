"""Tests for CI exit-code gating of ``skillroute check`` via --fail-on."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from skillroute.cli.main import build_parser, main


def test_build_parser_fail_on_accepts_valid_choices(tmp_path: Path) -> None:
    """--fail-on accepts error and warning."""
    parser = build_parser()
    for level in ("error", "warning"):
        args = parser.parse_args(["check", "--root", str(tmp_path), "--fail-on", level])
        assert args.fail_on == level


@pytest.mark.parametrize(
    ("fail_on", "expected_exit"),
    [
        pytest.param("error", 0, id="warnings-pass-at-error"),
        pytest.param("warning", 1, id="warnings-fail-at-warning"),
    ],
)
def test_basic_workspace_gating(basic_repo_root: Path, fail_on: str, expected_exit: int) -> None:
    assert main(["check", "-r", str(basic_repo_root), "--fail-on", fail_on, "--no-color"]) == expected_exit


def test_broken_workspace_fails_by_default(broken_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["check", "-r", str(broken_repo_root), "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Skills      4" in out
    assert "[SKL004]" in out


def test_check_json_output(broken_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["check", "-r", str(broken_repo_root), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert payload["skill_count"] == 4
    codes = {issue["code"] for issue in payload["issues"]}
    assert {"SKL001", "SKL004", "SKL005", "SKL008"} <= codes
    assert {issue["level"] for issue in payload["issues"]} == {"error", "warning"}


def test_clean_workspace_passes_at_warning(tmp_path: Path, write_skill) -> None:
    write_skill(
        tmp_path,
        "clean",
        "\n".join(
            [
                "---",
                "name: clean",
                "description: A skill with nothing to report.",
                "---",
                "<routing>",
                "| Trigger | File |",
                "| --- | --- |",
                '| "go" | `workflows/go.md` |',
                "</routing>",
            ]
        ),
        {"workflows/go.md": "# Go\n"},
    )

    assert main(["check", "-r", str(tmp_path), "--fail-on", "warning"]) == 0
