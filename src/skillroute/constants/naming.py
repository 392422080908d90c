"""Constants for skill name slugs."""

from __future__ import annotations

import re
from re import Pattern

NON_SLUG_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9]+")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-{2,}")
