"""Resolve an intake response to the documents a skill's routing tables name.

Resolution is a pure lookup over immutable routing tables: the same skill
and response always produce the same :class:`RouteResolution`.

Matching works in two steps:

1. A bare number (``"2"``, ``"2."``) is a menu index. Rules listing that
   index fire. If none do but the intake menu has the option, the option's
   label is resolved as free text.
2. Anything else is free text, matched case-insensitively against each
   rule's keywords.

Rules from different tables always combine (a framework table and a task
table can both fire). Within one table the multi-match policy
decides what several matching rows mean:

- ``flag``: every matching row is reported and the status is ``ambiguous``,
  so the caller asks a clarifying question.
- ``first``: the first matching row wins.
- ``all``: every matching row fires.

Zero matching rules is a ``no_match`` outcome, never an error.
"""

from __future__ import annotations

import logging

from skillroute.constants.routing import (
    DEFAULT_MATCH_MODE,
    DEFAULT_MULTI_MATCH,
    MULTI_MATCH_FIRST,
    MULTI_MATCH_FLAG,
    STATUS_AMBIGUOUS,
    STATUS_MATCHED,
    STATUS_NO_MATCH,
)
from skillroute.exceptions import RoutingInputError
from skillroute.model import RouteMatch, RouteResolution, RoutingRule, RoutingTable, Skill
from skillroute.routing.matching import menu_index_of, normalize_response, rule_matches_text
from skillroute.types import MatchMode, MultiMatchPolicy

logger = logging.getLogger(__name__)


def resolve_route(
    skill: Skill,
    response: str,
    *,
    match_mode: MatchMode = DEFAULT_MATCH_MODE,
    multi_match: MultiMatchPolicy = DEFAULT_MULTI_MATCH,
) -> RouteResolution:
    """Resolve *response* against every routing table of *skill*.

    Raises:
        RoutingInputError: when *response* is empty or whitespace.
    """
    normalized = normalize_response(response)
    if not normalized:
        raise RoutingInputError("Routing response must not be empty")

    matches = _match_tables(skill, normalized, match_mode)
    selected = tuple(_apply_policy(match, multi_match) for match in matches)
    documents = _collect_documents(selected)

    if not documents:
        status = STATUS_NO_MATCH
    elif multi_match == MULTI_MATCH_FLAG and any(match.ambiguous for match in selected):
        status = STATUS_AMBIGUOUS
    else:
        status = STATUS_MATCHED

    logger.debug("Resolved %r for skill %s: %s (%d documents)", normalized, skill.name, status, len(documents))
    return RouteResolution(
        skill=skill.name,
        response=normalized,
        status=status,
        matches=selected,
        documents=documents,
        intake=skill.intake,
    )


def _match_tables(skill: Skill, normalized: str, match_mode: MatchMode) -> list[RouteMatch]:
    index = menu_index_of(normalized)
    if index is not None:
        by_index = _match_by_index(skill.routing_tables, index)
        if by_index:
            return by_index
        option = skill.intake.option(index)
        if option is None:
            return []
        normalized = normalize_response(option.label)

    matches: list[RouteMatch] = []
    for table in skill.routing_tables:
        fired = tuple(rule for rule in table.rules if rule_matches_text(rule, normalized, match_mode))
        if fired:
            matches.append(RouteMatch(table=table.name, rules=fired))
    return matches


def _match_by_index(tables: tuple[RoutingTable, ...], index: int) -> list[RouteMatch]:
    matches: list[RouteMatch] = []
    for table in tables:
        fired = tuple(rule for rule in table.rules if index in rule.menu_indices)
        if fired:
            matches.append(RouteMatch(table=table.name, rules=fired))
    return matches


def _apply_policy(match: RouteMatch, multi_match: MultiMatchPolicy) -> RouteMatch:
    if multi_match == MULTI_MATCH_FIRST and match.ambiguous:
        return RouteMatch(table=match.table, rules=match.rules[:1])
    return match


def _collect_documents(matches: tuple[RouteMatch, ...]) -> tuple[str, ...]:
    documents: dict[str, None] = {}
    for match in matches:
        for rule in match.rules:
            for target in rule.targets:
                documents.setdefault(target, None)
    return tuple(documents)


def matching_rules(resolution: RouteResolution) -> tuple[RoutingRule, ...]:
    """Flatten the rules that fired in a resolution."""
    return tuple(rule for match in resolution.matches for rule in match.rules)
