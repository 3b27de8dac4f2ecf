# journeykit/components/journeys/registry.py
"""Journey registry.

Journeys are keyed by slug and declared atomically with their milestone and
detour references, so detours are validated eagerly on registration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Literal

from journeykit.exceptions import IdentityResolutionError
from journeykit.identity.domains import CONTEXTS, EVENTS, JOURNEYS, STAKEHOLDERS
from journeykit.identity.references import ByIdentity, Reference
from journeykit.identity.utils import declaration_name
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry
from journeykit.validation.detours import DetourGraphReport, audit_detour_graph, validate_detours

from .metadata import JourneyMetadata, JourneyReference, MilestoneReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathItem:
    """One waypoint on a journey's full path."""

    type: Literal["milestone", "detour"]
    data: MilestoneReference | JourneyReference

    @property
    def order(self) -> float:
        return self.data.order


class JourneyRegistry(KeyedRegistry[JourneyMetadata]):
    kind = JOURNEYS
    label = "JOURNEY"

    def build_indexes(self):
        return (
            SecondaryIndex("name", lambda m: m.name),
            SecondaryIndex("stakeholder", lambda m: m.primary_stakeholder),
            SecondaryIndex("context", lambda m: m.context),
        )

    def key_for(self, metadata: JourneyMetadata, owner: Any) -> str:
        return metadata.slug

    def prepare(self, metadata: JourneyMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.primary_stakeholder = self.ref_key(STAKEHOLDERS, metadata.primary_stakeholder)
        metadata.participating_stakeholders = self.ref_keys(STAKEHOLDERS, metadata.participating_stakeholders)
        metadata.triggering_event = self.ref_key(EVENTS, metadata.triggering_event)
        metadata.context = self.ref_key(CONTEXTS, metadata.context)

        if metadata.detours:
            validate_detours(
                metadata.name,
                metadata.detours,
                metadata.milestones,
                milestone_name=declaration_name,
            )
            logger.debug("[%s] `%s` detours validated (%d)", self.label, metadata.slug, len(metadata.detours))

    # --- lookups ---

    def get_by_slug(self, slug: str) -> RegistryEntry[JourneyMetadata] | None:
        return self.get(slug)

    def get_by_name(self, name: str) -> RegistryEntry[JourneyMetadata] | None:
        matches = self.lookup("name", name)
        return matches[0] if matches else None

    def get_by_stakeholder(self, stakeholder: Any) -> list[RegistryEntry[JourneyMetadata]]:
        return self.lookup("stakeholder", self.ref_key(STAKEHOLDERS, stakeholder) or "")

    def get_by_context(self, context: Any) -> list[RegistryEntry[JourneyMetadata]]:
        return self.lookup("context", self.ref_key(CONTEXTS, context) or "")

    def get_critical(self) -> list[RegistryEntry[JourneyMetadata]]:
        return self.filter(lambda m: m.critical_path)

    def get_all(self) -> list[RegistryEntry[JourneyMetadata]]:
        return self.all()

    def all_stakeholders(self) -> tuple[str, ...]:
        return self.index("stakeholder").values()

    def find(self, ref: Any) -> RegistryEntry[JourneyMetadata] | None:
        """Registered journey for a reference: a journey class, a slug or a name."""
        parsed = Reference.of(ref)
        if parsed is None:
            return None
        if isinstance(parsed, ByIdentity):
            owned = self.get_by_owner(parsed.handle)
            return owned[0] if owned else None
        return self.get(parsed.name) or self.get_by_name(parsed.name)

    # --- paths ---

    def get_detours(self, slug: str) -> list[JourneyReference] | None:
        entry = self.get(slug)
        return list(entry.metadata.detours) if entry is not None else None

    def get_main_path(self, slug: str) -> list[MilestoneReference] | None:
        """Milestones only, sorted by order."""
        entry = self.get(slug)
        if entry is None or not entry.metadata.milestones:
            return None
        return sorted(entry.metadata.milestones, key=lambda m: m.order)

    def get_full_path(self, slug: str) -> list[PathItem] | None:
        """Milestones and detours interleaved by order."""
        entry = self.get(slug)
        if entry is None:
            return None
        path = [PathItem("milestone", m) for m in entry.metadata.milestones]
        path += [PathItem("detour", d) for d in entry.metadata.detours]
        return sorted(path, key=lambda item: item.order)

    # --- detours ---

    def get_detour_journeys(self) -> list[RegistryEntry[JourneyMetadata]]:
        return self.filter(lambda m: m.is_detour)

    def get_journeys_using_detour(self, detour_slug: str) -> list[RegistryEntry[JourneyMetadata]]:
        target = self.get(detour_slug)
        if target is None:
            return []

        def uses_target(metadata: JourneyMetadata) -> bool:
            for detour in metadata.detours:
                ref = Reference.of(detour.journey)
                if isinstance(ref, ByIdentity):
                    if ref.handle is target.owner:
                        return True
                elif ref is not None and ref.name in (detour_slug, target.metadata.name):
                    return True
            return False

        return self.filter(uses_target)

    def validate_detour_graph(self, slug: str) -> DetourGraphReport:
        """Audit a registered journey's detours. Never raises."""
        entry = self.get(slug)
        if entry is None:
            return DetourGraphReport(errors=(f"Journey {slug!r} not found in registry",))

        def find_journey(ref: Any) -> JourneyMetadata | None:
            try:
                found = self.find(ref)
            except IdentityResolutionError:
                return None
            return found.metadata if found is not None else None

        def describe(ref: Any) -> str:
            return declaration_name(ref) if ref is not None else "<missing>"

        return audit_detour_graph(entry.metadata, find_journey=find_journey, describe=describe)

    # --- stats ---

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_journeys": len(self._store),
                "critical_journeys": len(self.get_critical()),
                "detour_journeys": len(self.get_detour_journeys()),
                "by_stakeholder": self.index("stakeholder").counts(),
                "by_context": self.index("context").counts(),
            }
