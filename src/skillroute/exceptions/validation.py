"""Structured validation error model for config and integrity checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from skillroute.constants.validation import LEVEL_ERROR, LEVEL_RANK
from skillroute.types import IssueLevel


@dataclass(frozen=True)
class ValidationError:
    """One problem found in a config file or a skill, at a stable code and location."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None
    level: IssueLevel = LEVEL_ERROR

    @property
    def location(self) -> str:
        return self.path if self.line is None else f"{self.path}:{self.line}"

    @property
    def sort_key(self) -> tuple[str, str, str, int, str]:
        return (self.code, self.path, self.field, self.line or 0, self.message)

    def at_least(self, level: IssueLevel) -> bool:
        """Whether this problem is as severe as *level* or more."""
        return LEVEL_RANK.get(self.level, 0) >= LEVEL_RANK[level]

    def format(self) -> str:
        """Render as ``[CODE] path:line message (hint)``."""
        text = f"[{self.code}] {self.location} {self.message}"
        return f"{text} ({self.hint})" if self.hint else text

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        return {"code": payload.pop("code"), "level": payload.pop("level"), **payload}


def sort_errors(errors: Iterable[ValidationError]) -> list[ValidationError]:
    """Order problems by code, then path, field, line and message."""
    return sorted(errors, key=lambda error: error.sort_key)


def format_errors(errors: Iterable[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
