"""Trigger matching for routing rules."""

from __future__ import annotations

import re
from functools import lru_cache

from skillroute.constants.routing import MATCH_MODE_SUBSTRING, MENU_INDEX_INPUT_PATTERN
from skillroute.model import RoutingRule
from skillroute.types import MatchMode


def normalize_response(response: str) -> str:
    """Lower-case a response and collapse internal whitespace."""
    return " ".join(response.split()).lower()


def menu_index_of(response: str) -> int | None:
    """Return the menu index when *response* is a bare number such as ``2`` or ``2.``."""
    match = MENU_INDEX_INPUT_PATTERN.match(response.strip())
    if not match:
        return None
    return int(match.group(1))


def keyword_matches(keyword: str, normalized_response: str, match_mode: MatchMode) -> bool:
    """Whether *keyword* occurs in an already normalized response."""
    if not keyword:
        return False
    if match_mode == MATCH_MODE_SUBSTRING:
        return keyword in normalized_response
    return _word_pattern(keyword).search(normalized_response) is not None


def rule_matches_text(rule: RoutingRule, normalized_response: str, match_mode: MatchMode) -> bool:
    return any(keyword_matches(keyword, normalized_response, match_mode) for keyword in rule.keywords)


@lru_cache(maxsize=512)
def _word_pattern(keyword: str) -> re.Pattern[str]:
    # Keywords may contain punctuation ("node.js", "ci/cd"), so boundaries are
    # "not alphanumeric" rather than \b.
    return re.compile(rf"(?<![a-z0-9]){re.escape(' '.join(keyword.split()))}(?![a-z0-9])")
