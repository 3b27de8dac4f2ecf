# journeykit/components/attributes/registry.py
"""Attribute registry.

Attributes belong to a component declaration (a persona class, a bounded
context, ...) and come from two places: the ``attributes`` list of the
component's own metadata (``inline``) or per-attribute declarations
(``decorator``). Entries are keyed by ``"<component>:<source>:<name>"`` so the
same attribute name may exist once per source; queries that merge both let the
decorator entry win.
"""

import re
from collections.abc import Iterable
from typing import Any

from journeykit.exceptions import IdentityResolutionError
from journeykit.identity.domains import ATTRIBUTES
from journeykit.identity.utils import declaration_name
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry

from .metadata import AttributeMetadata, AttributeSource


class AttributeRegistry(KeyedRegistry[AttributeMetadata]):
    kind = ATTRIBUTES
    label = "ATTRIBUTE"

    def build_indexes(self):
        return (
            SecondaryIndex("component", lambda m: m.component),
            SecondaryIndex("source", lambda m: m.source),
            SecondaryIndex("type", lambda m: m.type),
        )

    def key_for(self, metadata: AttributeMetadata, owner: Any) -> str:
        return f"{metadata.component}:{metadata.source}:{metadata.name}"

    def prepare(self, metadata: AttributeMetadata, owner: Any, options: dict[str, Any]) -> None:
        if owner is None:
            raise IdentityResolutionError(f"Attribute {metadata.name!r} must be registered for a component")
        metadata.component = declaration_name(owner)
        if metadata.type is not None:
            metadata.type = declaration_name(metadata.type)

    # --- registration ---

    def register_inline(
        self, component: Any, attributes: Iterable[AttributeMetadata]
    ) -> list[RegistryEntry[AttributeMetadata]]:
        """Register the ``attributes`` declared in ``component``'s own metadata."""
        return [self.register_inline_attribute(component, attribute) for attribute in attributes]

    def register_inline_attribute(
        self, component: Any, attribute: AttributeMetadata
    ) -> RegistryEntry[AttributeMetadata]:
        return self._register_from(component, attribute, "inline")

    def register_decorator(self, component: Any, attribute: AttributeMetadata) -> RegistryEntry[AttributeMetadata]:
        return self._register_from(component, attribute, "decorator")

    def _register_from(
        self, component: Any, attribute: AttributeMetadata, source: AttributeSource
    ) -> RegistryEntry[AttributeMetadata]:
        # Copies keep a component's own metadata free of registry bookkeeping.
        return self.register(attribute.model_copy(update={"source": source}), component)

    # --- lookups ---

    def _of(self, component: Any, source: AttributeSource) -> list[AttributeMetadata]:
        return [e.metadata for e in self.get_by_owner(component) if e.metadata.source == source]

    def get_inline(self, component: Any) -> list[AttributeMetadata]:
        return self._of(component, "inline")

    def get_decorator(self, component: Any) -> list[AttributeMetadata]:
        return self._of(component, "decorator")

    def has_inline(self, component: Any) -> bool:
        return bool(self.get_inline(component))

    def has_decorator(self, component: Any) -> bool:
        return bool(self.get_decorator(component))

    def get_attributes(self, component: Any) -> list[AttributeMetadata]:
        """Inline and decorator attributes of ``component`` merged by name; decorator entries win."""
        merged: dict[str, AttributeMetadata] = {}
        for metadata in self.get_inline(component) + self.get_decorator(component):
            merged[metadata.name] = metadata
        return list(merged.values())

    def _grouped(self, source: AttributeSource | None = None) -> dict[Any, list[AttributeMetadata]]:
        grouped: dict[Any, list[AttributeMetadata]] = {}
        for entry in self.all():
            if source is None or entry.metadata.source == source:
                grouped.setdefault(entry.owner, []).append(entry.metadata)
        return grouped

    def get_all_inline(self) -> dict[Any, list[AttributeMetadata]]:
        """Component declaration -> its inline attributes."""
        return self._grouped("inline")

    def get_all_decorator(self) -> dict[Any, list[AttributeMetadata]]:
        return self._grouped("decorator")

    def get_all_components(self) -> list[Any]:
        return list(self._grouped())

    def component_count(self) -> int:
        return len(self._grouped())

    def query_by_name(self, pattern: str | re.Pattern[str]) -> dict[Any, list[AttributeMetadata]]:
        """Merged attributes of every component whose name matches ``pattern`` (``re.search``)."""
        regex = re.compile(pattern)
        return {
            component: self.get_attributes(component)
            for component in self.get_all_components()
            if regex.search(declaration_name(component))
        }

    def get_by_type(self, type_name: Any) -> list[RegistryEntry[AttributeMetadata]]:
        return self.lookup("type", declaration_name(type_name))

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_attributes": len(self._store),
                "components": self.component_count(),
                "by_source": self.index("source").counts(),
                "by_type": self.index("type").counts(),
            }


class DeclaresAttributes:
    """Mixin for registries whose records carry an inline ``attributes`` list.

    Once the record itself is stored, its attributes are registered for the
    same owner in the ``attributes`` registry of the set.
    """

    def register(self, metadata: Any, owner: Any = None, **options: Any) -> RegistryEntry[Any]:
        entry = super().register(metadata, owner, **options)
        attributes = self.sibling(ATTRIBUTES)
        if attributes is not None and entry.metadata.attributes:
            attributes.register_inline(entry.owner, entry.metadata.attributes)
        return entry
