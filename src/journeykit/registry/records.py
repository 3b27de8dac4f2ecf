"""Registry entries and their resolution state.

Every registration produces one :class:`RegistryEntry`. Entries declared
inline under a parent that may not be registered yet start out
:class:`Pending`; the lazy resolver moves them to :data:`RESOLVED` once the
parent provides every awaited field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class Pending:
    """Entry still waiting for ``awaiting`` fields from its ``parent`` declaration."""

    parent: Any
    awaiting: frozenset[str]

    def without(self, filled: set[str] | frozenset[str]) -> "Pending | Resolved":
        remaining = self.awaiting - frozenset(filled)
        if not remaining:
            return RESOLVED
        return Pending(self.parent, remaining)


@dataclass(frozen=True, slots=True)
class Resolved:
    """Entry with nothing left to inherit."""

    def __repr__(self) -> str:
        return "RESOLVED"


RESOLVED = Resolved()


@dataclass(slots=True, eq=False)
class RegistryEntry(Generic[M]):
    """One registered metadata record.

    ``owner`` is the opaque declaration identity (class, function or label)
    that produced ``metadata``.
    """

    key: str
    metadata: M
    owner: Any
    state: Pending | Resolved = field(default=RESOLVED)

    @property
    def is_pending(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def name(self) -> str:
        return self.key


__all__ = ["Pending", "RESOLVED", "RegistryEntry", "Resolved"]
