"""Core data models for skillroute."""

from .entities import (
    ChecklistItem,
    Document,
    DocumentLine,
    IntakeMenu,
    MenuOption,
    ParsedSkillDocument,
    RouteMatch,
    RouteResolution,
    RoutingRule,
    RoutingTable,
    Skill,
)

__all__ = [
    "ChecklistItem",
    "Document",
    "DocumentLine",
    "IntakeMenu",
    "MenuOption",
    "ParsedSkillDocument",
    "RouteMatch",
    "RouteResolution",
    "RoutingRule",
    "RoutingTable",
    "Skill",
]
