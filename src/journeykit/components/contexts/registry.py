# journeykit/components/contexts/registry.py

from typing import Any, NamedTuple

from journeykit.components.attributes.registry import DeclaresAttributes
from journeykit.components.enums import ContextRelationshipType
from journeykit.identity.domains import CONTEXTS
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry

from .metadata import BoundedContextMetadata


class RelatedContext(NamedTuple):
    context_name: str
    relationship_type: str


class BoundedContextRegistry(DeclaresAttributes, KeyedRegistry[BoundedContextMetadata]):
    kind = CONTEXTS
    label = "BOUNDED_CONTEXT"

    def build_indexes(self):
        return (
            SecondaryIndex("owner", lambda m: m.owner),
            SecondaryIndex("tag", lambda m: m.tags),
        )

    def get_by_context_owner(self, owner: str) -> list[RegistryEntry[BoundedContextMetadata]]:
        """Contexts owned by the team ``owner``."""
        return self.lookup("owner", owner)

    def get_by_tag(self, tag: str) -> list[RegistryEntry[BoundedContextMetadata]]:
        return self.lookup("tag", tag)

    def get_related_contexts(
        self,
        context: Any,
        relationship_type: ContextRelationshipType | str | None = None,
    ) -> list[RelatedContext]:
        """
        Contexts ``context`` declares a relationship with.

        :param context: Context name or declaration.
        :param relationship_type: Only return relationships of this type.
        :return: ``(context_name, relationship_type)`` pairs in declaration
                 order; empty for unknown contexts.
        """
        entry = self.get(self.ref_key(CONTEXTS, context) or "")
        if entry is None:
            return []
        wanted = getattr(relationship_type, "value", relationship_type)
        return [
            RelatedContext(name, kind)
            for name, kind in entry.metadata.relationships.items()
            if wanted is None or kind == wanted
        ]

    def get_upstream_contexts(self, context: Any) -> list[str]:
        return [r.context_name for r in self.get_related_contexts(context, ContextRelationshipType.UPSTREAM)]

    def get_downstream_contexts(self, context: Any) -> list[str]:
        return [r.context_name for r in self.get_related_contexts(context, ContextRelationshipType.DOWNSTREAM)]

    def get_vocabulary(self, context: Any) -> dict[str, str] | None:
        entry = self.get(self.ref_key(CONTEXTS, context) or "")
        return dict(entry.metadata.vocabulary) if entry is not None else None
