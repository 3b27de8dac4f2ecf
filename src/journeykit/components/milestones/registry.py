# journeykit/components/milestones/registry.py

import math
from typing import Any

from journeykit.identity.domains import EVENTS, JOURNEYS, MILESTONES, STAKEHOLDERS
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry
from journeykit.validation.graph import DependencyGraph

from .metadata import MilestoneMetadata


class MilestoneRegistry(KeyedRegistry[MilestoneMetadata]):
    """Milestones keyed by name.

    A milestone is linked to journeys either by being declared inline in one
    (``register(..., journey_slug=...)``) or through its own ``journeys`` list
    when it is reused across journeys.
    """

    kind = MILESTONES
    label = "MILESTONE"

    def build_indexes(self):
        return (
            SecondaryIndex("id", lambda m: m.id),
            SecondaryIndex("journey", lambda m: m.journeys),
            SecondaryIndex("stakeholder", lambda m: m.stakeholder),
        )

    def prepare(self, metadata: MilestoneMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.stakeholder = self.ref_key(STAKEHOLDERS, metadata.stakeholder)
        metadata.business_event = self.ref_key(EVENTS, metadata.business_event)
        journeys = self.ref_keys(JOURNEYS, metadata.journeys)
        journey_slug = options.get("journey_slug")
        if journey_slug and journey_slug not in journeys:
            journeys.append(journey_slug)
        metadata.journeys = journeys

    def get_by_name(self, name: str) -> RegistryEntry[MilestoneMetadata] | None:
        return self.get(name)

    def get_by_id(self, milestone_id: str) -> RegistryEntry[MilestoneMetadata] | None:
        matches = self.lookup("id", milestone_id)
        return matches[0] if matches else None

    def get_by_journey(self, journey_slug: str) -> list[RegistryEntry[MilestoneMetadata]]:
        """Milestones linked to a journey, by order; unordered milestones last."""
        entries = self.lookup("journey", journey_slug)
        return sorted(entries, key=lambda e: e.metadata.order if e.metadata.order is not None else math.inf)

    def get_by_stakeholder(self, stakeholder: Any) -> list[RegistryEntry[MilestoneMetadata]]:
        return self.lookup("stakeholder", self.ref_key(STAKEHOLDERS, stakeholder) or "")

    def get_prerequisites(self, name: str) -> list[RegistryEntry[MilestoneMetadata]]:
        entry = self.get(name)
        if entry is None:
            return []
        return self._entries_for(entry.metadata.prerequisites)

    def get_reusable(self) -> list[RegistryEntry[MilestoneMetadata]]:
        return self.filter(lambda m: m.reusable)

    def get_stateful(self) -> list[RegistryEntry[MilestoneMetadata]]:
        return self.filter(lambda m: m.stateful)

    def get_all(self) -> list[RegistryEntry[MilestoneMetadata]]:
        return self.all()

    def all_journey_slugs(self) -> tuple[str, ...]:
        return self.index("journey").values()

    def dependency_graph(self) -> DependencyGraph:
        def edges(name: str) -> list[str]:
            entry = self.get(name)
            return list(entry.metadata.prerequisites) if entry is not None else []

        return DependencyGraph(edges)

    def has_circular_dependency(self, name: str) -> bool:
        return self.dependency_graph().has_cycle(name)

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_milestones": len(self._store),
                "reusable_milestones": len(self.get_reusable()),
                "stateful_milestones": len(self.get_stateful()),
                "by_journey": self.index("journey").counts(),
                "by_stakeholder": self.index("stakeholder").counts(),
            }
