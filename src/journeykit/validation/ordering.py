# journeykit/validation/ordering.py
"""Well-formedness report for the ``order`` values of sibling steps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

__all__ = [
    "DuplicateOrder",
    "MissingOrder",
    "OrderGap",
    "OrderingIssue",
    "OrderingReport",
    "StartNotAtOne",
    "validate_ordering",
]


@dataclass(frozen=True, slots=True)
class MissingOrder:
    names: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Steps missing order: {', '.join(self.names)}"


@dataclass(frozen=True, slots=True)
class DuplicateOrder:
    order: int
    names: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Duplicate step order {self.order}: {', '.join(self.names)}"


@dataclass(frozen=True, slots=True)
class OrderGap:
    after: int
    before: int

    @property
    def message(self) -> str:
        return f"Gap in step ordering: {self.after} -> {self.before}"


@dataclass(frozen=True, slots=True)
class StartNotAtOne:
    start: int

    @property
    def message(self) -> str:
        return f"Step ordering should start at 1, but starts at {self.start}"


OrderingIssue = Union[MissingOrder, DuplicateOrder, OrderGap, StartNotAtOne]


@dataclass(frozen=True, slots=True)
class OrderingReport:
    issues: tuple[OrderingIssue, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]

    def of_type(self, issue_type: type) -> list[OrderingIssue]:
        return [issue for issue in self.issues if isinstance(issue, issue_type)]


def validate_ordering(steps: Iterable[Any]) -> OrderingReport:
    """Check sibling steps (anything with ``name`` and ``order``).

    A step without an order short-circuits the report with a single
    :class:`MissingOrder`; otherwise duplicates, gaps between consecutive
    distinct orders and a start other than 1 are each reported.
    """
    steps = list(steps)
    if not steps:
        return OrderingReport()

    missing = tuple(s.name for s in steps if s.order is None)
    if missing:
        return OrderingReport((MissingOrder(missing),))

    issues: list[OrderingIssue] = []
    counts = Counter(s.order for s in steps)
    for order, count in counts.items():
        if count > 1:
            issues.append(DuplicateOrder(order, tuple(s.name for s in steps if s.order == order)))

    unique = sorted(counts)
    for prev, nxt in zip(unique, unique[1:]):
        if nxt - prev > 1:
            issues.append(OrderGap(prev, nxt))

    if unique[0] != 1:
        issues.append(StartNotAtOne(unique[0]))

    return OrderingReport(tuple(issues))
