# journeykit/components/logic/registry.py

from typing import Any

from journeykit.identity.domains import CONTEXTS, LOGIC
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry
from journeykit.validation.graph import DependencyGraph

from .metadata import LogicMetadata


class LogicRegistry(KeyedRegistry[LogicMetadata]):
    """Executable logic units keyed by name.

    ``invokes`` and ``composed_of`` form a dependency graph over logic names;
    cycles are detected on demand and never at registration.
    """

    kind = LOGIC
    label = "LOGIC"

    def build_indexes(self):
        return (
            SecondaryIndex("type", lambda m: m.type),
            SecondaryIndex("context", lambda m: m.context),
        )

    def prepare(self, metadata: LogicMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.context = self.ref_key(CONTEXTS, metadata.context)
        metadata.invokes = self.ref_keys(LOGIC, metadata.invokes)

    def get_by_name(self, name: str) -> RegistryEntry[LogicMetadata] | None:
        return self.get(name)

    def get_by_type(self, logic_type: str) -> list[RegistryEntry[LogicMetadata]]:
        return self.lookup("type", str(getattr(logic_type, "value", logic_type)))

    def get_by_context(self, context: Any) -> list[RegistryEntry[LogicMetadata]]:
        return self.lookup("context", self.ref_key(CONTEXTS, context) or "")

    def get_all(self) -> list[RegistryEntry[LogicMetadata]]:
        return self.all()

    def find_compatible(
        self,
        inputs: dict[str, str] | None = None,
        outputs: dict[str, str] | None = None,
    ) -> list[RegistryEntry[LogicMetadata]]:
        """Logic whose declared inputs/outputs agree with every given ``name: type`` pair.

        Logic that declares no inputs (or outputs) is not constrained by them.
        """

        def agrees(declared: dict[str, str], wanted: dict[str, str] | None) -> bool:
            if not wanted or not declared:
                return True
            return all(declared.get(key) == value for key, value in wanted.items())

        return self.filter(lambda m: agrees(m.inputs, inputs) and agrees(m.outputs, outputs))

    # --- dependencies ---

    def get_dependencies(self, name: str) -> list[str]:
        """Names ``name`` invokes or is composed of, in declaration order, deduplicated."""
        entry = self.get(name)
        if entry is None:
            return []
        deps = dict.fromkeys(entry.metadata.invokes)
        for ref in entry.metadata.composed_of:
            key = self.ref_key(LOGIC, ref.logic)
            if key is not None:
                deps.setdefault(key)
        return list(deps)

    def dependency_graph(self) -> DependencyGraph:
        return DependencyGraph(self.get_dependencies)

    def has_cycle(self, name: str) -> bool:
        return self.dependency_graph().has_cycle(name)

    def find_cycle(self, name: str) -> list[str] | None:
        return self.dependency_graph().find_cycle(name)

    def require_acyclic(self, name: str) -> None:
        """:raises CyclicDependencyError: if ``name`` reaches a cycle."""
        self.dependency_graph().require_acyclic(name)

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_logic": len(self._store),
                "pure_logic": len(self.filter(lambda m: m.pure)),
                "idempotent_logic": len(self.filter(lambda m: m.idempotent)),
                "by_type": self.index("type").counts(),
                "by_context": self.index("context").counts(),
            }
