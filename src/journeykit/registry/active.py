# journeykit/registry/active.py
"""Active registry-set helpers."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from threading import Lock
from typing import Any, Generator

from journeykit.conf import Settings
from journeykit.identity import IdentityResolver
from journeykit.identity.domains import (
    ATTRIBUTES,
    BEHAVIORS,
    CONTEXTS,
    EVENTS,
    EXPECTATIONS,
    JOURNEYS,
    LOGIC,
    MILESTONES,
    PERSONAS,
    STAKEHOLDERS,
    STEPS,
    TESTS,
    normalize_kind,
)

from .base import KeyedRegistry
from .store import RegistrySet

_active_set: ContextVar[RegistrySet | None] = ContextVar("journeykit_registry_set", default=None)
_default_set: RegistrySet | None = None
_default_lock = Lock()


def get_default_registry_set() -> RegistrySet:
    """Process-wide fallback set, configured from ``JOURNEYKIT_CONFIG_MODULE`` on first use."""
    global _default_set
    with _default_lock:
        if _default_set is None:
            settings = Settings()
            settings.update_from_envvar()
            _default_set = RegistrySet(settings)
        return _default_set


@contextmanager
def push_registry_set(registries: RegistrySet | None = None) -> Generator[RegistrySet, None, None]:
    """Make ``registries`` (a fresh set when omitted) active for the ``with`` block."""
    registries = registries if registries is not None else RegistrySet()
    token = _active_set.set(registries)
    try:
        yield registries
    finally:
        _active_set.reset(token)


def get_registry_set() -> RegistrySet:
    registries = _active_set.get()
    if registries is not None:
        return registries
    return get_default_registry_set()


class ActiveRegistry:
    """
    Module-level handle for the ``kind`` registry of the active set.

    The target is looked up on every access, so ``journeykit.registry.journeys``
    follows :func:`push_registry_set` blocks.
    """

    __slots__ = ("kind",)

    def __init__(self, kind: str) -> None:
        self.kind = normalize_kind(kind)

    def current(self) -> KeyedRegistry[Any]:
        return get_registry_set().registry(self.kind)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.current(), name)

    def __contains__(self, key: object) -> bool:
        return key in self.current()

    def __len__(self) -> int:
        return len(self.current())

    def __repr__(self) -> str:
        return f"<ActiveRegistry kind={self.kind!r}>"


def get_identity() -> IdentityResolver:
    """Identity resolver of the active set."""
    return get_registry_set().identity


journeys = ActiveRegistry(JOURNEYS)
milestones = ActiveRegistry(MILESTONES)
steps = ActiveRegistry(STEPS)
expectations = ActiveRegistry(EXPECTATIONS)
behaviors = ActiveRegistry(BEHAVIORS)
tests = ActiveRegistry(TESTS)
logic = ActiveRegistry(LOGIC)
events = ActiveRegistry(EVENTS)
personas = ActiveRegistry(PERSONAS)
stakeholders = ActiveRegistry(STAKEHOLDERS)
contexts = ActiveRegistry(CONTEXTS)
attributes = ActiveRegistry(ATTRIBUTES)


__all__ = [
    "ActiveRegistry",
    "attributes",
    "behaviors",
    "contexts",
    "events",
    "expectations",
    "get_default_registry_set",
    "get_registry_set",
    "get_identity",
    "journeys",
    "logic",
    "milestones",
    "personas",
    "push_registry_set",
    "stakeholders",
    "steps",
    "tests",
]
