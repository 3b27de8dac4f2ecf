"""Lazy inheritance for entries declared inline under a parent declaration.

A Behavior declared inside an Expectation, or a Test declared inside a
Behavior, inherits identifying fields from that parent. Declarations are
registered in whatever order the host program defines them, so the parent may
not be registered yet. Such entries are stored immediately (visible by key)
but kept out of the inherited indexes until :meth:`InheritingRegistry.resolve_all`
finds the parent and copies the awaited fields over.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, ClassVar, TypeVar

from journeykit.tracing import registry_span

from .base import KeyedRegistry
from .records import RESOLVED, Pending, RegistryEntry, Resolved

logger = logging.getLogger(__name__)

M = TypeVar("M")


class PendingResolutions:
    """Thread-safe, insertion-ordered working set of pending registry keys."""

    def __init__(self) -> None:
        self._keys: dict[str, None] = {}
        self._lock = RLock()

    def add(self, key: str) -> None:
        with self._lock:
            self._keys[key] = None

    def discard(self, key: str) -> None:
        with self._lock:
            self._keys.pop(key, None)

    def snapshot(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._keys)

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)


class InheritingRegistry(KeyedRegistry[M]):
    """Keyed registry whose inline entries inherit fields from a parent kind.

    Subclasses set :attr:`parent_kind` and :attr:`inherited_fields` and
    implement :meth:`inherit`. An entry is pending when it was registered with
    a ``parent`` option and at least one inherited field is unset.
    """

    parent_kind: ClassVar[str] = ""
    inherited_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._pending = PendingResolutions()
        self._resolving = False

    # --- hooks ---

    def entry_state(self, metadata: M, owner: Any, options: dict[str, Any]) -> Pending | Resolved:
        parent = options.get("parent")
        if parent is None:
            return RESOLVED
        awaiting = frozenset(f for f in self.inherited_fields if getattr(metadata, f, None) is None)
        return Pending(parent, awaiting) if awaiting else RESOLVED

    def after_register(self, entry: RegistryEntry[M]) -> None:
        if entry.is_pending:
            self._pending.add(entry.key)

    def on_clear(self) -> None:
        self._pending.clear()

    def parent_registry(self) -> KeyedRegistry[Any] | None:
        return self.sibling(self.parent_kind) if self.parent_kind else None

    def find_parent(self, parents: KeyedRegistry[Any], handle: Any) -> RegistryEntry[Any] | None:
        matches = parents.get_by_owner(handle)
        if matches:
            return matches[0]
        return parents.get(handle) if isinstance(handle, str) else None

    def inherit(self, field: str, parent: RegistryEntry[Any]) -> Any | None:
        """Value the ``parent`` entry provides for ``field``, or ``None`` if it has none yet."""
        raise NotImplementedError

    # --- resolution ---

    def pending(self) -> list[RegistryEntry[M]]:
        """Entries still waiting on their parent."""
        return self._entries_for(self._pending.snapshot())

    def resolve_all(self) -> int:
        """
        Run one resolution pass over the pending working set.

        For each pending entry the parent is looked up in the parent registry
        by declaration identity. Every awaited field the parent can provide is
        copied onto the metadata and indexed; entries with nothing left to
        await become resolved and leave the working set. Entries whose parent
        is still missing are kept for the next pass.

        Re-entrant calls (and calls with an empty working set) are no-ops.

        :return: Number of entries that became resolved during this pass.
        """
        if not self._pending or self._resolving:
            return 0

        with self._lock:
            self._resolving = True
            try:
                return self._resolve_pass()
            finally:
                self._resolving = False

    def _resolve_pass(self) -> int:
        parents = self.parent_registry()
        if isinstance(parents, InheritingRegistry):
            parents.resolve_all()

        resolved = 0
        with registry_span(self.kind, "resolve_all", pending=len(self._pending)) as current:
            for key in self._pending.snapshot():
                entry = self._store.get(key)
                if entry is None or not isinstance(entry.state, Pending):
                    self._pending.discard(key)
                    continue

                state = entry.state
                parent = self.find_parent(parents, state.parent) if parents is not None else None
                if parent is None:
                    if self.config.WARN_ON_UNRESOLVED:
                        logger.warning(
                            "[%s] `%s` is waiting on %s which is not registered as a %s",
                            self.label,
                            key,
                            getattr(state.parent, "__qualname__", state.parent),
                            self.parent_kind.rstrip("s") or "parent",
                        )
                    continue

                filled: set[str] = set()
                for field in sorted(state.awaiting):
                    value = self.inherit(field, parent)
                    if value is not None:
                        setattr(entry.metadata, field, value)
                        filled.add(field)

                if filled:
                    self._index_entry(entry)
                entry.state = state.without(filled)
                if entry.state is RESOLVED:
                    self._pending.discard(key)
                    resolved += 1
                    logger.debug("[%s] resolved `%s` from `%s`", self.label, key, parent.key)
                else:
                    logger.debug(
                        "[%s] `%s` still awaiting %s from `%s`",
                        self.label, key, ", ".join(sorted(entry.state.awaiting)), parent.key,
                    )
            current.set_attribute("journeykit.resolved", resolved)
        return resolved


__all__ = ["InheritingRegistry", "PendingResolutions"]
