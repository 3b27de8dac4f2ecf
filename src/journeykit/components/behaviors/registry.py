# journeykit/components/behaviors/registry.py

from typing import Any

from journeykit.identity.domains import BEHAVIORS, CONTEXTS, EXPECTATIONS, LOGIC, TESTS
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.pending import InheritingRegistry
from journeykit.registry.records import RegistryEntry

from .metadata import BehaviorMetadata


class BehaviorRegistry(InheritingRegistry[BehaviorMetadata]):
    """Behaviors keyed by name.

    A behavior declared inline in an Expectation (``register(meta, fn,
    parent=ExpectationCls)``) inherits that expectation's id once the
    expectation is registered. Standalone behaviors are linked to
    expectations through the expectation's ``behaviors`` list instead.
    """

    kind = BEHAVIORS
    label = "BEHAVIOR"
    parent_kind = EXPECTATIONS
    inherited_fields = ("expectation_id",)

    def build_indexes(self):
        return (
            SecondaryIndex("context", lambda m: m.context),
            SecondaryIndex("expectation", lambda m: m.expectation_id),
            SecondaryIndex("execution_mode", lambda m: m.execution_mode),
            SecondaryIndex("type", lambda m: m.contract_type),
        )

    def prepare(self, metadata: BehaviorMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.context = self.ref_key(CONTEXTS, metadata.context)
        metadata.invokes_logic = self.ref_key(LOGIC, metadata.invokes_logic)

    def inherit(self, field: str, parent: RegistryEntry[Any]) -> Any | None:
        if field == "expectation_id":
            return parent.metadata.expectation_id
        return None

    # --- lookups ---

    def get_by_name(self, name: str) -> RegistryEntry[BehaviorMetadata] | None:
        return self.get(name)

    def get_by_context(self, context: Any) -> list[RegistryEntry[BehaviorMetadata]]:
        return self.lookup("context", self.ref_key(CONTEXTS, context) or "")

    def get_by_expectation(self, expectation_id: str) -> list[RegistryEntry[BehaviorMetadata]]:
        """Behaviors owned by the expectation plus the ones it lists by name."""
        self.resolve_all()
        entries = self.lookup("expectation", expectation_id)
        expectations = self.sibling(EXPECTATIONS)
        expectation = expectations.get(expectation_id) if expectations is not None else None
        if expectation is not None:
            seen = {e.key for e in entries}
            for linked in self._entries_for(expectation.metadata.behaviors):
                if linked.key not in seen:
                    seen.add(linked.key)
                    entries.append(linked)
        return entries

    def expectation_id_for(self, name: str) -> str | None:
        """The behavior's own expectation id, else the first expectation listing it."""
        self.resolve_all()
        entry = self.get(name)
        if entry is not None and entry.metadata.expectation_id:
            return entry.metadata.expectation_id
        expectations = self.sibling(EXPECTATIONS)
        if expectations is None:
            return None
        listing = expectations.get_by_behavior(name)
        return listing[0].key if listing else None

    def get_by_execution_mode(self, mode: str) -> list[RegistryEntry[BehaviorMetadata]]:
        return self.lookup("execution_mode", str(getattr(mode, "value", mode)))

    def get_by_type(self, contract_type: str) -> list[RegistryEntry[BehaviorMetadata]]:
        return self.lookup("type", str(getattr(contract_type, "value", contract_type)))

    def get_reusable(self) -> list[RegistryEntry[BehaviorMetadata]]:
        self.resolve_all()
        return self.filter(lambda m: not m.expectation_id)

    def get_expectation_specific(self) -> list[RegistryEntry[BehaviorMetadata]]:
        self.resolve_all()
        return self.filter(lambda m: bool(m.expectation_id))

    def get_all(self) -> list[RegistryEntry[BehaviorMetadata]]:
        self.resolve_all()
        return self.all()

    # --- coverage ---

    def get_coverage_by_behavior(self) -> dict[str, int]:
        """Number of registered tests per behavior name."""
        tests = self.sibling(TESTS)
        return {key: len(tests.get_by_behavior(key)) if tests is not None else 0 for key in self.keys()}

    def get_stats(self) -> dict[str, Any]:
        self.resolve_all()
        coverage = self.get_coverage_by_behavior()
        total = len(coverage)
        with_tests = sum(1 for count in coverage.values() if count > 0)
        return {
            "total_behaviors": total,
            "reusable_behaviors": len(self.get_reusable()),
            "expectation_specific": len(self.get_expectation_specific()),
            "pending_behaviors": len(self._pending),
            "behaviors_with_tests": with_tests,
            "behaviors_without_tests": total - with_tests,
            "average_tests_per_behavior": round(sum(coverage.values()) / total, 2) if total else 0,
            "by_context": self.index("context").counts(),
            "by_execution_mode": self.index("execution_mode").counts(),
        }
