# journeykit/validation/detours.py
"""Detour checks for journeys.

A detour is a sub-journey that branches off the main path between two
milestones and may rejoin it later. Detour orders are fractional so they sort
between the integer-ordered milestones (``2.5`` sits between milestones 2 and
3).

:func:`validate_detours` runs when a journey is registered and raises on the
first structural problem. :func:`audit_detour_graph` is the on-demand audit
that needs other registered journeys and reports instead of raising.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from journeykit.exceptions import DetourValidationError

__all__ = ["DetourGraphReport", "audit_detour_graph", "validate_detours"]

logger = logging.getLogger(__name__)

NameFn = Callable[[Any], "str | None"]


def _label(detour: Any) -> str:
    return detour.label or "Unnamed detour"


def _format_order(order: float) -> str:
    return f"{order:g}"


def validate_detours(
    journey: str,
    detours: Sequence[Any],
    milestones: Sequence[Any],
    *,
    milestone_name: NameFn,
) -> None:
    """
    Validate a journey's detours against its own milestone references.

    :param journey: Journey name, used in error messages.
    :param detours: ``JourneyReference`` items.
    :param milestones: ``MilestoneReference`` items.
    :param milestone_name: Maps a milestone reference (class or string) to its name.
    :raises DetourValidationError: on an integer or duplicate detour order, an
        unknown ``triggered_after`` or ``rejoins_at`` milestone, or an order that
        does not sit next to any milestone order.
    """
    milestone_orders = {m.order for m in milestones}
    milestone_names = {milestone_name(m.milestone) for m in milestones}
    seen: set[float] = set()

    for detour in detours:
        label = _label(detour)
        order = detour.order

        if float(order).is_integer():
            raise DetourValidationError(
                journey,
                f"detour {label!r} has integer order {_format_order(order)}. "
                "Detours must use fractional orders (e.g. 2.5) to branch between milestones.",
            )
        if order in seen:
            raise DetourValidationError(
                journey, f"duplicate detour order {_format_order(order)} found for {label!r}"
            )
        seen.add(order)

        if not milestones:
            continue

        trigger = milestone_name(detour.triggered_after)
        if trigger not in milestone_names:
            raise DetourValidationError(
                journey, f"detour {label!r} references unknown milestone {trigger!r} in triggered_after"
            )

        rejoin = detour.rejoins_at
        if rejoin is not None:
            if isinstance(rejoin, (int, float)) and not isinstance(rejoin, bool):
                if rejoin not in milestone_orders:
                    raise DetourValidationError(
                        journey, f"detour {label!r} rejoins_at order {_format_order(rejoin)} does not exist"
                    )
            elif milestone_name(rejoin) not in milestone_names:
                raise DetourValidationError(
                    journey, f"detour {label!r} rejoins_at milestone {rejoin!r} does not exist"
                )

        whole = math.floor(order)
        if whole not in milestone_orders and whole + 1 not in milestone_orders:
            raise DetourValidationError(
                journey,
                f"detour {label!r} order {_format_order(order)} is not between any valid milestones",
            )


@dataclass(frozen=True, slots=True)
class DetourGraphReport:
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(slots=True)
class _Collector:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def report(self) -> DetourGraphReport:
        return DetourGraphReport(tuple(self.errors), tuple(self.warnings))


def audit_detour_graph(
    journey: Any,
    *,
    find_journey: Callable[[Any], Any | None],
    describe: Callable[[Any], str],
) -> DetourGraphReport:
    """
    Audit a registered journey's detours against the other registered journeys.

    :param journey: The journey's ``JourneyMetadata``.
    :param find_journey: Maps a detour's journey reference to the registered
        ``JourneyMetadata`` (or ``None``).
    :param describe: Human-readable name for a journey reference.
    """
    out = _Collector()
    detours = journey.detours or []
    if not detours:
        return out.report()

    for detour in detours:
        identifier = describe(detour.journey)
        target = find_journey(detour.journey)
        if target is None:
            out.warnings.append(
                f"Detour {(detour.label or identifier)!r} references journey {identifier!r} "
                "which is not registered"
            )
        elif not target.is_detour:
            out.warnings.append(
                f"Journey {target.name!r} is used as a detour but is not marked with is_detour=True"
            )

    orders = [d.order for d in detours]
    if len(orders) != len(set(orders)):
        out.errors.append("Duplicate detour orders detected")

    milestone_orders = [m.order for m in journey.milestones or []]
    if milestone_orders:
        low, high = min(milestone_orders), max(milestone_orders)
        for detour in detours:
            if detour.order < low or detour.order > high:
                out.warnings.append(
                    f"Detour {(detour.label or 'Unnamed')!r} order {_format_order(detour.order)} "
                    f"falls outside milestone range [{_format_order(low)}, {_format_order(high)}]"
                )

    for message in out.warnings:
        logger.warning("[JOURNEY] %s: %s", journey.slug, message)
    return out.report()
