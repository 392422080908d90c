"""Subcommand handlers. Each takes parsed arguments and returns an exit code."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from skillroute.catalog import Workspace, load_document, load_routed_documents, load_workspace
from skillroute.exceptions.validation import format_errors
from skillroute.integrity import check_workspace, exceeds_threshold
from skillroute.reporting import write_catalog
from skillroute.reporting.stdout import (
    CheckReporter,
    ResolutionReporter,
    render_checklist,
    render_intake,
    render_skill_list,
)
from skillroute.routing import resolve_route
from skillroute.validation import preflight_validate

logger = logging.getLogger(__name__)


def _workspace(args: argparse.Namespace) -> Workspace:
    return load_workspace(args.root, args.config)


def handle_list(args: argparse.Namespace) -> int:
    workspace = _workspace(args)
    print(render_skill_list(workspace.skills, color=args.color))
    return 0


def handle_intake(args: argparse.Namespace) -> int:
    skill = _workspace(args).get(args.skill)
    print(render_intake(skill.intake, skill_name=skill.name))
    return 0


def handle_route(args: argparse.Namespace) -> int:
    """Resolve a response; no_match still exits 0 and prints the intake menu."""
    workspace = _workspace(args)
    skill = workspace.get(args.skill)
    config = workspace.config
    resolution = resolve_route(
        skill,
        args.response,
        match_mode=args.match_mode or config.match_mode,
        multi_match=args.multi_match or config.multi_match,
    )
    documents = load_routed_documents(skill, resolution, config) if args.load else ()

    if args.json:
        payload = resolution.to_dict()
        if args.load:
            payload["loaded"] = [
                {"path": document.path, "kind": document.kind, "content": document.content}
                for document in documents
            ]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    reporter = ResolutionReporter(resolution, documents=documents, color=args.color, verbose=args.verbose)
    print(reporter.render())
    return 0


def handle_checklist(args: argparse.Namespace) -> int:
    workspace = _workspace(args)
    skill = workspace.get(args.skill)
    if args.document:
        document = load_document(skill, args.document, workspace.config)
        print(render_checklist(document.checklist, title=document.path))
    else:
        print(render_checklist(skill.verification, title=skill.name))
    return 0


def handle_check(args: argparse.Namespace) -> int:
    workspace = _workspace(args)
    errors = check_workspace(workspace)
    if args.json:
        payload = {
            "skill_count": len(workspace.skills),
            "issues": [error.to_dict() for error in errors],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(CheckReporter(errors, skill_count=len(workspace.skills), color=args.color).render())
    return 1 if exceeds_threshold(errors, args.fail_on) else 0


def handle_index(args: argparse.Namespace) -> int:
    workspace = _workspace(args)
    target = write_catalog(args.output_dir, workspace)
    logger.info("Wrote catalog for %d skills to %s", len(workspace.skills), target)
    print(str(target))
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run preflight validation only."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2
    print("Configuration is valid.")
    return 0
