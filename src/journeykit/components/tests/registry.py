# journeykit/components/tests/registry.py
"""Test registry.

Tests are keyed by test id. Ids not given explicitly are generated as
``"<expectation_id>-TEST-<NNN>"`` with a counter per expectation id; a test
whose expectation is not known yet is numbered under the configured
placeholder (``UNRESOLVED`` by default) and keeps that id after resolution.
"""

from typing import Any

from journeykit.identity.domains import BEHAVIORS, EXPECTATIONS, TESTS
from journeykit.registry.ids import IdSequence
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.pending import InheritingRegistry
from journeykit.registry.records import RegistryEntry

from .metadata import TestMetadata


class TestRegistry(InheritingRegistry[TestMetadata]):
    __test__ = False

    kind = TESTS
    label = "TEST"
    parent_kind = BEHAVIORS
    inherited_fields = ("behavior_id", "expectation_id")

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._ids = IdSequence("TEST")

    def build_indexes(self):
        return (
            SecondaryIndex("expectation", lambda m: m.expectation_id),
            SecondaryIndex("behavior", lambda m: m.behavior_id),
            SecondaryIndex("type", lambda m: m.type),
            SecondaryIndex("framework", lambda m: m.framework or "unknown"),
        )

    def prepare(self, metadata: TestMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.expectation_id = self.identity.resolve(EXPECTATIONS, metadata.expectation_id)
        metadata.behavior_id = self.ref_key(BEHAVIORS, metadata.behavior_id)

    def _id_prefix(self, metadata: TestMetadata) -> str:
        return metadata.expectation_id or self.config.TEST_ID_PLACEHOLDER

    def key_for(self, metadata: TestMetadata, owner: Any) -> str:
        if metadata.test_id:
            return metadata.test_id
        return self._ids.next_free(self._id_prefix(metadata), self.config.TEST_ID_WIDTH, self._store)

    def after_register(self, entry: RegistryEntry[TestMetadata]) -> None:
        super().after_register(entry)
        if not entry.metadata.test_id:
            self._ids.claim(self._id_prefix(entry.metadata), entry.key)
            entry.metadata.test_id = entry.key

    def on_clear(self) -> None:
        super().on_clear()
        self._ids.clear()

    def inherit(self, field: str, parent: RegistryEntry[Any]) -> Any | None:
        if field == "behavior_id":
            return parent.metadata.name
        if field == "expectation_id":
            behaviors = self.parent_registry()
            return behaviors.expectation_id_for(parent.key) if behaviors is not None else None
        return None

    # --- lookups ---

    def get_by_id(self, test_id: str) -> RegistryEntry[TestMetadata] | None:
        return self.get(test_id)

    def get_by_expectation(self, expectation_id: str) -> list[RegistryEntry[TestMetadata]]:
        self.resolve_all()
        return self.lookup("expectation", expectation_id)

    def get_by_behavior(self, behavior: Any) -> list[RegistryEntry[TestMetadata]]:
        self.resolve_all()
        return self.lookup("behavior", self.ref_key(BEHAVIORS, behavior) or "")

    def get_by_type(self, test_type: str) -> list[RegistryEntry[TestMetadata]]:
        return self.lookup("type", str(getattr(test_type, "value", test_type)))

    def get_all(self) -> list[RegistryEntry[TestMetadata]]:
        self.resolve_all()
        return self.all()

    # --- coverage ---

    def get_covered_expectations(self) -> list[str]:
        self.resolve_all()
        return list(self.index("expectation").values())

    def has_tests(self, expectation_id: str) -> bool:
        return bool(self.get_by_expectation(expectation_id))

    def get_coverage(self, all_expectation_ids: list[str] | None = None) -> dict[str, Any]:
        """
        Test coverage over expectations.

        :param all_expectation_ids: Universe of expectation ids. Defaults to the
            ids that have at least one test (i.e. 100% when non-empty).
        """
        covered = self.get_covered_expectations()
        total = len(covered)
        if all_expectation_ids is not None:
            universe = set(all_expectation_ids)
            covered = [eid for eid in covered if eid in universe]
            total = len(universe)
        percentage = round(len(covered) / total * 100, 2) if total else 0
        return {
            "total_tests": self.count(),
            "total_expectations": total,
            "covered_expectations": len(covered),
            "coverage_percentage": percentage,
            "by_type": self.index("type").counts(),
        }

    def get_gaps(self, all_expectation_ids: list[str]) -> list[str]:
        """Expectation ids from ``all_expectation_ids`` with no test."""
        covered = set(self.get_covered_expectations())
        return [eid for eid in all_expectation_ids if eid not in covered]

    def get_stats(self) -> dict[str, Any]:
        self.resolve_all()
        return {
            "total_tests": self.count(),
            "total_expectations": len(self.index("expectation").values()),
            "pending_tests": len(self._pending),
            "by_type": self.index("type").counts(),
            "by_framework": self.index("framework").counts(),
        }
