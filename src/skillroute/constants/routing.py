"""Constants for routing resolution."""

from __future__ import annotations

import re
from re import Pattern

from skillroute.types import MatchMode, MultiMatchPolicy, RouteStatus

MATCH_MODE_WORD: str = "word"
MATCH_MODE_SUBSTRING: str = "substring"
VALID_MATCH_MODES: frozenset[str] = frozenset({MATCH_MODE_WORD, MATCH_MODE_SUBSTRING})
DEFAULT_MATCH_MODE: MatchMode = "word"

MULTI_MATCH_FLAG: str = "flag"
MULTI_MATCH_FIRST: str = "first"
MULTI_MATCH_ALL: str = "all"
VALID_MULTI_MATCH_POLICIES: frozenset[str] = frozenset({MULTI_MATCH_FLAG, MULTI_MATCH_FIRST, MULTI_MATCH_ALL})
DEFAULT_MULTI_MATCH: MultiMatchPolicy = "flag"

STATUS_MATCHED: RouteStatus = "matched"
STATUS_AMBIGUOUS: RouteStatus = "ambiguous"
STATUS_NO_MATCH: RouteStatus = "no_match"

MENU_INDEX_INPUT_PATTERN: Pattern[str] = re.compile(r"^(\d+)[.)]?$")
GLOB_CHARS: frozenset[str] = frozenset("*?[")
