# journeykit/components/events/registry.py
"""Domain events and their handlers."""

import logging
from typing import Any

from journeykit.exceptions import IdentityResolutionError
from journeykit.identity.domains import CONTEXTS, EVENTS
from journeykit.identity.utils import declaration_name
from journeykit.registry.base import KeyedRegistry
from journeykit.registry.indexes import SecondaryIndex
from journeykit.registry.records import RegistryEntry

from .metadata import DomainEventMetadata, EventHandlerMetadata

logger = logging.getLogger(__name__)


class HandlerRegistry(KeyedRegistry[EventHandlerMetadata]):
    """Event handlers keyed by name, listed per event type by descending priority.

    Handlers with equal priority keep their registration order.
    """

    kind = "handlers"
    label = "EVENT_HANDLER"

    def build_indexes(self):
        return (SecondaryIndex("event_type", lambda m: m.event_type, order_by=lambda m: -m.priority),)

    def prepare(self, metadata: EventHandlerMetadata, owner: Any, options: dict[str, Any]) -> None:
        if not metadata.name:
            if owner is None:
                raise IdentityResolutionError("Event handler needs a name or an owner to take it from")
            metadata.name = declaration_name(owner)
        metadata.event_type = self.identity.event_type(metadata.event_type)
        if not metadata.event_type:
            raise IdentityResolutionError(f"Event handler {metadata.name!r} does not name an event type")
        if metadata.priority is None:
            metadata.priority = self.config.DEFAULT_HANDLER_PRIORITY

    def register(
        self,
        metadata: EventHandlerMetadata,
        owner: Any = None,
        *,
        replace: bool = False,
        **options: Any,
    ) -> RegistryEntry[EventHandlerMetadata]:
        """
        Register a handler.

        With ``replace=True`` a handler already registered under the same name
        for the same event type has its priority updated in place (and the
        event's handler list re-sorted) instead of raising.

        :raises DuplicateKeyError: for any other re-registration of a name.
        """
        if replace:
            with self._lock:
                self.prepare(metadata, owner, options)
                existing = self._store.get(self.key_for(metadata, owner))
                if existing is not None and existing.metadata.event_type == metadata.event_type:
                    self._ensure_mutable()
                    existing.metadata.priority = metadata.priority
                    self._indexes["event_type"].sort(existing.metadata.event_type, self._metadata_for)
                    logger.debug(
                        "[%s] `%s` re-prioritised to %s", self.label, existing.key, existing.metadata.priority
                    )
                    return existing
        return super().register(metadata, owner, **options)


class EventRegistry(KeyedRegistry[DomainEventMetadata]):
    """Domain events keyed by event type, plus the handlers listening to them."""

    kind = EVENTS
    label = "EVENT"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.handlers = HandlerRegistry(**kwargs)

    def build_indexes(self):
        return (
            SecondaryIndex("name", lambda m: m.name),
            SecondaryIndex("context", lambda m: m.context),
            SecondaryIndex("aggregate", lambda m: m.aggregate_type),
        )

    def key_for(self, metadata: DomainEventMetadata, owner: Any) -> str:
        return metadata.event_type

    def prepare(self, metadata: DomainEventMetadata, owner: Any, options: dict[str, Any]) -> None:
        if not metadata.event_type:
            if owner is None:
                raise IdentityResolutionError("Domain event needs an event_type or an owner to derive it from")
            metadata.event_type = self.identity.event_type(owner)
        if not metadata.name and owner is not None:
            metadata.name = declaration_name(owner)
        metadata.context = self.ref_key(CONTEXTS, metadata.context)

    # --- events ---

    def register_event(self, metadata: DomainEventMetadata, owner: Any = None) -> RegistryEntry[DomainEventMetadata]:
        return self.register(metadata, owner)

    def get_event(self, event_type: str) -> RegistryEntry[DomainEventMetadata] | None:
        return self.get(event_type)

    def get_event_by_name(self, name: str) -> RegistryEntry[DomainEventMetadata] | None:
        matches = self.lookup("name", name)
        return matches[0] if matches else None

    def has_event(self, event_type: str) -> bool:
        return event_type in self

    def get_by_context(self, context: Any) -> list[RegistryEntry[DomainEventMetadata]]:
        return self.lookup("context", self.ref_key(CONTEXTS, context) or "")

    def get_by_aggregate(self, aggregate_type: str) -> list[RegistryEntry[DomainEventMetadata]]:
        return self.lookup("aggregate", aggregate_type)

    def get_all_events(self) -> list[RegistryEntry[DomainEventMetadata]]:
        return self.all()

    # --- handlers ---

    def register_handler(
        self,
        metadata: EventHandlerMetadata,
        owner: Any = None,
        *,
        replace: bool = False,
    ) -> RegistryEntry[EventHandlerMetadata]:
        return self.handlers.register(metadata, owner, replace=replace)

    def get_handlers_for(self, event: Any) -> list[RegistryEntry[EventHandlerMetadata]]:
        """Handlers of ``event`` (class or event type), highest priority first."""
        return self.handlers.lookup("event_type", self.identity.event_type(event) or "")

    def get_handler_by_name(self, name: str) -> RegistryEntry[EventHandlerMetadata] | None:
        return self.handlers.get(name)

    def has_handlers_for(self, event: Any) -> bool:
        return bool(self.get_handlers_for(event))

    def get_all_handlers(self) -> list[RegistryEntry[EventHandlerMetadata]]:
        return self.handlers.all()

    def get_event_handler_map(self) -> dict[str, int]:
        """Number of handlers per event type."""
        return self.handlers.index("event_type").counts()

    # --- control ---

    def clear(self) -> None:
        super().clear()
        self.handlers.clear()

    def freeze(self) -> None:
        super().freeze()
        self.handlers.freeze()

    def get_stats(self) -> dict[str, Any]:
        handler_map = self.get_event_handler_map()
        with self._lock:
            with_handlers = sum(1 for event_type in self._store if handler_map.get(event_type))
            return {
                "total_events": len(self._store),
                "total_handlers": self.handlers.count(),
                "by_context": self.index("context").counts(),
                "by_aggregate": self.index("aggregate").counts(),
                "events_with_handlers": with_handlers,
                "events_without_handlers": len(self._store) - with_handlers,
            }
