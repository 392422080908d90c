"""Shared type aliases for skillroute."""

from .common import (
    DocumentKind,
    IssueLevel,
    JsonObject,
    JsonScalar,
    JsonValue,
    MatchMode,
    MultiMatchPolicy,
    RouteStatus,
)

__all__ = [
    "DocumentKind",
    "IssueLevel",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MatchMode",
    "MultiMatchPolicy",
    "RouteStatus",
]
