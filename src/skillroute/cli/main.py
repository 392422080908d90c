"""CLI entrypoint for skillroute."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillroute import __version__
from skillroute.cli.handlers import (
    handle_check,
    handle_checklist,
    handle_index,
    handle_intake,
    handle_list,
    handle_route,
    handle_validate_config,
)
from skillroute.constants.branding import CLI_DESCRIPTION
from skillroute.constants.routing import VALID_MATCH_MODES, VALID_MULTI_MATCH_POLICIES
from skillroute.exceptions import ConfigError, SkillrouteError
from skillroute.exceptions.validation import format_errors
from skillroute.validation import preflight_validate

HANDLERS = {
    "list": handle_list,
    "intake": handle_intake,
    "route": handle_route,
    "checklist": handle_checklist,
    "check": handle_check,
    "index": handle_index,
}


def _add_workspace_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show matched rows and debug logging")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillroute",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List skills and their descriptions")
    _add_workspace_args(list_cmd)

    intake = subparsers.add_parser("intake", help="Print a skill's intake menu")
    _add_workspace_args(intake)
    intake.add_argument("-s", "--skill", required=True, help="Skill name or folder")

    route = subparsers.add_parser("route", help="Resolve an intake response to documents")
    _add_workspace_args(route)
    route.add_argument("-s", "--skill", required=True, help="Skill name or folder")
    route.add_argument("response", help="Menu number or free-text response")
    route.add_argument("-l", "--load", action="store_true", help="Print the full text of routed documents")
    route.add_argument("--json", action="store_true", help="Print the resolution as JSON")
    route.add_argument(
        "--match-mode",
        choices=sorted(VALID_MATCH_MODES),
        default=None,
        help="Keyword matching: word (whole words, default) or substring",
    )
    route.add_argument(
        "--multi-match",
        choices=sorted(VALID_MULTI_MATCH_POLICIES),
        default=None,
        help="Several rows in one table: flag (ambiguous, default), first (first row wins) or all (union)",
    )

    checklist = subparsers.add_parser("checklist", help="Print a skill's verification checklist")
    _add_workspace_args(checklist)
    checklist.add_argument("-s", "--skill", required=True, help="Skill name or folder")
    checklist.add_argument(
        "-d",
        "--document",
        default=None,
        help="Skill-relative workflow or reference whose checklist to print",
    )

    check = subparsers.add_parser("check", help="Check routing targets, frontmatter and links")
    _add_workspace_args(check)
    check.add_argument(
        "--fail-on",
        choices=["error", "warning"],
        default="error",
        help="Exit non-zero when an issue at this level or above is found (default: error)",
    )
    check.add_argument("--json", action="store_true", help="Print issues as JSON")

    index = subparsers.add_parser("index", help="Write catalog.json for the workspace")
    _add_workspace_args(index)
    index.add_argument("-o", "--output-dir", type=Path, required=True, help="Directory for catalog.json")

    validate = subparsers.add_parser("validate-config", help="Validate configuration")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    args.color = not args.no_color and sys.stdout.isatty()
    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillrouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
