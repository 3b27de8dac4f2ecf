"""Structural validators: dependency cycles, step ordering and journey detours."""

from .detours import DetourGraphReport, audit_detour_graph, validate_detours
from .graph import DependencyGraph
from .ordering import (
    DuplicateOrder,
    MissingOrder,
    OrderGap,
    OrderingIssue,
    OrderingReport,
    StartNotAtOne,
    validate_ordering,
)

__all__ = [
    "DependencyGraph",
    "DetourGraphReport",
    "DuplicateOrder",
    "MissingOrder",
    "OrderGap",
    "OrderingIssue",
    "OrderingReport",
    "StartNotAtOne",
    "audit_detour_graph",
    "validate_detours",
    "validate_ordering",
]
