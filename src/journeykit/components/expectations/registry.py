# journeykit/components/expectations/registry.py

import logging
from dataclasses import dataclass
from typing import Any

from journeykit.components.enums import ContextRelationshipType, ExpectationPriority
from journeykit.exceptions import IdentityResolutionError
from journeykit.identity.domains import BEHAVIORS, CONTEXTS, EXPECTATIONS, MILESTONES, STAKEHOLDERS
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.ids import IdSequence
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry

from .metadata import ExpectationMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContextCheck:
    valid: bool
    warning: str | None = None
    error: str | None = None


class ExpectationRegistry(KeyedRegistry[ExpectationMetadata]):
    """Expectations keyed by expectation id.

    Expectations declared without an id inside a journey get
    ``"<journey_slug>-EXP-<NNN>"``, numbered per journey.
    """

    kind = EXPECTATIONS
    label = "EXPECTATION"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._ids = IdSequence("EXP")

    def build_indexes(self):
        return (
            SecondaryIndex("journey", lambda m: m.journey_slug),
            SecondaryIndex("milestone", lambda m: m.milestone),
            SecondaryIndex("behavior", lambda m: m.behaviors),
            SecondaryIndex(
                "stakeholder",
                lambda m: dict.fromkeys(s for s in (m.expecting_stakeholder, m.providing_stakeholder) if s),
            ),
            SecondaryIndex("priority", lambda m: m.priority),
        )

    def prepare(self, metadata: ExpectationMetadata, owner: Any, options: dict[str, Any]) -> None:
        if not metadata.expectation_id and not metadata.journey_slug:
            raise IdentityResolutionError(
                "Expectation needs an expectation_id or a journey_slug to number it under"
            )
        metadata.expecting_stakeholder = self.ref_key(STAKEHOLDERS, metadata.expecting_stakeholder)
        metadata.providing_stakeholder = self.ref_key(STAKEHOLDERS, metadata.providing_stakeholder)
        metadata.milestone = self.ref_key(MILESTONES, metadata.milestone)
        metadata.behaviors = self.ref_keys(BEHAVIORS, metadata.behaviors)

    def key_for(self, metadata: ExpectationMetadata, owner: Any) -> str:
        if metadata.expectation_id:
            return metadata.expectation_id
        return self._ids.next_free(metadata.journey_slug, self.config.EXPECTATION_ID_WIDTH, self._store)

    def after_register(self, entry: RegistryEntry[ExpectationMetadata]) -> None:
        if not entry.metadata.expectation_id:
            self._ids.claim(entry.metadata.journey_slug, entry.key)
            entry.metadata.expectation_id = entry.key

    def on_clear(self) -> None:
        self._ids.clear()

    # --- lookups ---

    def get_by_id(self, expectation_id: str) -> RegistryEntry[ExpectationMetadata] | None:
        return self.get(expectation_id)

    def get_by_journey(self, journey_slug: str) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.lookup("journey", journey_slug)

    def get_by_milestone(self, milestone: Any) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.lookup("milestone", self.ref_key(MILESTONES, milestone) or "")

    def get_by_behavior(self, behavior: Any) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.lookup("behavior", self.ref_key(BEHAVIORS, behavior) or "")

    def get_by_stakeholder(self, stakeholder: Any) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.lookup("stakeholder", self.ref_key(STAKEHOLDERS, stakeholder) or "")

    def get_critical(self) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.filter(lambda m: m.critical_path or m.priority == ExpectationPriority.CRITICAL.value)

    def get_all(self) -> list[RegistryEntry[ExpectationMetadata]]:
        return self.all()

    # --- cross-context ---

    def validate_context_relationship(self, expectation_id: str) -> ContextCheck:
        """Check that the two stakeholders' bounded contexts know about each other.

        Stakeholders that are unregistered or share a context pass. Contexts
        with no declared relationship in either direction produce a warning.
        """
        entry = self.get(expectation_id)
        if entry is None:
            return ContextCheck(False, error=f"Expectation {expectation_id!r} not found in registry")

        stakeholders = self.sibling(STAKEHOLDERS)
        contexts = self.sibling(CONTEXTS)
        if stakeholders is None or contexts is None:
            return ContextCheck(True)

        expecting = stakeholders.context_of(entry.metadata.expecting_stakeholder)
        providing = stakeholders.context_of(entry.metadata.providing_stakeholder)
        if expecting is None or providing is None or expecting == providing:
            return ContextCheck(True)

        expecting_links = {name for name, _ in contexts.get_related_contexts(expecting)}
        providing_links = {name for name, _ in contexts.get_related_contexts(providing)}
        if providing in expecting_links or expecting in providing_links:
            return ContextCheck(True)

        warning = (
            f"stakeholders span contexts {expecting!r} and {providing!r} "
            f"with no declared relationship (e.g. {ContextRelationshipType.UPSTREAM.value!r})"
        )
        logger.warning("[EXPECTATION] %s: %s", expectation_id, warning)
        return ContextCheck(True, warning=warning)

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_expectations": len(self._store),
                "critical_expectations": len(self.get_critical()),
                "by_journey": self.index("journey").counts(),
                "by_milestone": self.index("milestone").counts(),
                "by_priority": self.index("priority").counts(),
            }
