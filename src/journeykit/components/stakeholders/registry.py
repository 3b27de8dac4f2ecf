# journeykit/components/stakeholders/registry.py

import logging
from typing import Any

from journeykit.components.attributes.registry import DeclaresAttributes
from journeykit.identity.domains import CONTEXTS, PERSONAS, STAKEHOLDERS
from journeykit.identity.utils import kebab_case
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry

from .metadata import PersonaMetadata, StakeholderMetadata

logger = logging.getLogger(__name__)


class PersonaRegistry(DeclaresAttributes, KeyedRegistry[PersonaMetadata]):
    kind = PERSONAS
    label = "PERSONA"

    def build_indexes(self):
        return (
            SecondaryIndex("type", lambda m: m.type),
            SecondaryIndex("tag", lambda m: m.tags),
        )

    def get_by_type(self, persona_type: Any) -> list[RegistryEntry[PersonaMetadata]]:
        return self.lookup("type", getattr(persona_type, "value", persona_type))

    def get_by_tag(self, tag: str) -> list[RegistryEntry[PersonaMetadata]]:
        return self.lookup("tag", tag)

    def names(self) -> tuple[str, ...]:
        return self.keys()


class StakeholderRegistry(DeclaresAttributes, KeyedRegistry[StakeholderMetadata]):
    """Stakeholders keyed by id (``"<context>:<role>"`` unless given)."""

    kind = STAKEHOLDERS
    label = "STAKEHOLDER"

    def build_indexes(self):
        return (
            SecondaryIndex("persona", lambda m: m.persona),
            SecondaryIndex("context", lambda m: m.context),
            SecondaryIndex("role", lambda m: m.role),
            SecondaryIndex("tag", lambda m: m.tags),
        )

    def key_for(self, metadata: StakeholderMetadata, owner: Any) -> str:
        return metadata.id

    def prepare(self, metadata: StakeholderMetadata, owner: Any, options: dict[str, Any]) -> None:
        metadata.persona = self.ref_key(PERSONAS, metadata.persona)
        metadata.context = self.ref_key(CONTEXTS, metadata.context)
        if not metadata.name:
            metadata.name = metadata.role
        if not metadata.id:
            metadata.id = f"{kebab_case(metadata.context or '')}:{kebab_case(metadata.role)}"

        personas = self.sibling(PERSONAS)
        if personas is not None and metadata.persona and metadata.persona not in personas:
            logger.warning(
                "[%s] `%s` references persona %r, which is not registered",
                self.label,
                metadata.id,
                metadata.persona,
            )

    def get_by_persona(self, persona: Any) -> list[RegistryEntry[StakeholderMetadata]]:
        return self.lookup("persona", self.ref_key(PERSONAS, persona) or "")

    def get_by_context(self, context: Any) -> list[RegistryEntry[StakeholderMetadata]]:
        return self.lookup("context", self.ref_key(CONTEXTS, context) or "")

    def get_by_role(self, role: str) -> list[RegistryEntry[StakeholderMetadata]]:
        return self.lookup("role", role)

    def get_by_tag(self, tag: str) -> list[RegistryEntry[StakeholderMetadata]]:
        return self.lookup("tag", tag)

    def context_of(self, role: str | None) -> str | None:
        """Bounded context of the first stakeholder registered with ``role``."""
        if not role:
            return None
        matches = self.get_by_role(role)
        return matches[0].metadata.context if matches else None
