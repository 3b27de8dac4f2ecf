# journeykit/registry/store.py
"""One keyed registry per metadata kind, owned by an explicit context object."""
from threading import RLock
from typing import Any

from journeykit.conf import Settings
from journeykit.identity import IdentityResolver, normalize_kind

from .base import KeyedRegistry
from .pending import InheritingRegistry


class RegistrySet:
    """Container holding one registry instance for every supported kind.

    Registries created here share the set's :class:`Settings` and can read
    each other (``registry.sibling(kind)``) for cross-kind resolution.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        from journeykit.components.attributes.registry import AttributeRegistry
        from journeykit.components.behaviors.registry import BehaviorRegistry
        from journeykit.components.contexts.registry import BoundedContextRegistry
        from journeykit.components.events.registry import EventRegistry
        from journeykit.components.expectations.registry import ExpectationRegistry
        from journeykit.components.journeys.registry import JourneyRegistry
        from journeykit.components.logic.registry import LogicRegistry
        from journeykit.components.milestones.registry import MilestoneRegistry
        from journeykit.components.stakeholders.registry import PersonaRegistry, StakeholderRegistry
        from journeykit.components.steps.registry import StepRegistry
        from journeykit.components.tests.registry import TestRegistry

        self.settings = settings if settings is not None else Settings()
        self._lock = RLock()
        self._registries: dict[str, KeyedRegistry[Any]] = {}

        self.attributes = self._add(AttributeRegistry)
        self.personas = self._add(PersonaRegistry)
        self.stakeholders = self._add(StakeholderRegistry)
        self.contexts = self._add(BoundedContextRegistry)
        self.events = self._add(EventRegistry)
        self.logic = self._add(LogicRegistry)
        self.expectations = self._add(ExpectationRegistry)
        self.behaviors = self._add(BehaviorRegistry)
        self.tests = self._add(TestRegistry)
        self.steps = self._add(StepRegistry)
        self.milestones = self._add(MilestoneRegistry)
        self.journeys = self._add(JourneyRegistry)

        self.identity = IdentityResolver(self)

    def _add(self, registry_cls):
        registry = registry_cls(registries=self, settings=self.settings)
        self._registries[registry.kind] = registry
        return registry

    def registry(self, kind: str) -> KeyedRegistry[Any]:
        key = normalize_kind(kind)
        with self._lock:
            return self._registries[key]

    def __getitem__(self, kind: str) -> KeyedRegistry[Any]:
        return self.registry(kind)

    def items(self) -> dict[str, KeyedRegistry[Any]]:
        with self._lock:
            return dict(self._registries)

    def kinds(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._registries.keys()))

    def resolve_all(self) -> int:
        """Run a lazy-resolution pass on every registry that has inline entries."""
        return sum(
            registry.resolve_all()
            for registry in self.items().values()
            if isinstance(registry, InheritingRegistry)
        )

    def clear_all(self) -> None:
        for registry in self.items().values():
            registry.clear()

    def freeze_all(self) -> None:
        for registry in self.items().values():
            registry.freeze()

    def stats(self) -> dict[str, dict[str, Any]]:
        return {kind: registry.get_stats() for kind, registry in sorted(self.items().items())}

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        counts = ", ".join(f"{k}={len(r)}" for k, r in sorted(self.items().items()))
        return f"<RegistrySet {counts}>"


__all__ = ["RegistrySet"]
