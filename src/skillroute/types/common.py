"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

IssueLevel: TypeAlias = Literal["error", "warning"]
DocumentKind: TypeAlias = Literal["reference", "workflow", "template", "other"]
MatchMode: TypeAlias = Literal["word", "substring"]
MultiMatchPolicy: TypeAlias = Literal["flag", "first", "all"]
RouteStatus: TypeAlias = Literal["matched", "ambiguous", "no_match"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
