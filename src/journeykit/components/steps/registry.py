# journeykit/components/steps/registry.py

import logging
from typing import Any

from journeykit.exceptions import MissingOrderError
from journeykit.identity.domains import STAKEHOLDERS, STEPS
from journeykit.identity.utils import declaration_name
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry
from journeykit.validation.ordering import OrderingReport, validate_ordering

from .metadata import StepMetadata

logger = logging.getLogger(__name__)


class StepRegistry(KeyedRegistry[StepMetadata]):
    """Steps grouped under the milestone or journey that declares them.

    Step names are only unique within their parent, so entries are keyed by
    ``"<parent name>::<name>"`` and :meth:`get_by_name` returns a list.
    """

    kind = STEPS
    label = "STEP"

    def build_indexes(self):
        return (
            SecondaryIndex("name", lambda m: m.name),
            SecondaryIndex("parent", lambda m: m.parent),
            SecondaryIndex("actor", lambda m: m.actor),
        )

    def key_for(self, metadata: StepMetadata, owner: Any) -> str:
        return f"{metadata.parent}::{metadata.name}"

    def prepare(self, metadata: StepMetadata, owner: Any, options: dict[str, Any]) -> None:
        parent = options.get("parent")
        scope = parent if parent is not None else (owner if owner is not None else metadata.name)

        metadata.inline = metadata.inline or parent is not None
        if metadata.inline and metadata.order is None:
            raise MissingOrderError(
                f"Step {metadata.name!r} is declared inline in {declaration_name(scope)} and must define an order",
                names=(metadata.name,),
            )
        metadata.parent = declaration_name(scope)
        metadata.parent_type = options.get("parent_type", metadata.parent_type or "milestone")
        metadata.actor = self.ref_key(STAKEHOLDERS, metadata.actor)

    def _siblings(self, parent: Any) -> list[RegistryEntry[StepMetadata]]:
        return self.lookup("parent", declaration_name(parent))

    # --- lookups ---

    def get_by_name(self, name: str) -> list[RegistryEntry[StepMetadata]]:
        return self.lookup("name", name)

    def get_by_parent(self, parent: Any) -> list[RegistryEntry[StepMetadata]]:
        """
        Steps of ``parent`` (a class or its label) sorted by order.

        Duplicates and gaps are allowed here; see :meth:`validate_ordering`.

        :raises MissingOrderError: if any sibling has no order.
        """
        entries = self._siblings(parent)
        missing = [e.metadata.name for e in entries if e.metadata.order is None]
        if missing:
            raise MissingOrderError(
                f"Steps must have order defined when retrieved: {', '.join(missing)} in {declaration_name(parent)}",
                names=missing,
            )
        return sorted(entries, key=lambda e: e.metadata.order)

    def get_by_actor(self, actor: Any) -> list[RegistryEntry[StepMetadata]]:
        return self.lookup("actor", self.ref_key(STAKEHOLDERS, actor) or "")

    def get_optional(self) -> list[RegistryEntry[StepMetadata]]:
        return self.filter(lambda m: m.optional)

    def get_required(self) -> list[RegistryEntry[StepMetadata]]:
        return self.filter(lambda m: not m.optional)

    def get_with_alternatives(self) -> list[RegistryEntry[StepMetadata]]:
        return self.filter(lambda m: bool(m.alternatives))

    def get_all(self) -> list[RegistryEntry[StepMetadata]]:
        return self.all()

    def all_actors(self) -> tuple[str, ...]:
        return self.index("actor").values()

    # --- validation ---

    def validate_ordering(self, parent: Any) -> OrderingReport:
        """Report missing, duplicate, gapped or offset orders among ``parent``'s steps."""
        report = validate_ordering(e.metadata for e in self._siblings(parent))
        for message in report.messages:
            logger.warning("[STEP] %s: %s", declaration_name(parent), message)
        return report

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_steps": len(self._store),
                "optional_steps": len(self.get_optional()),
                "required_steps": len(self.get_required()),
                "steps_with_alternatives": len(self.get_with_alternatives()),
                "by_actor": self.index("actor").counts(),
            }
