# journeykit/components/events/metadata.py

from journeykit.components.base import BaseMetadata, DeclarationRef


class DomainEventMetadata(BaseMetadata):
    # Derived from the event class name when omitted: OrderPlacedEvent -> "order.placed".
    event_type: str | None = None
    context: DeclarationRef = None
    aggregate_type: str | None = None


class EventHandlerMetadata(BaseMetadata):
    event_type: DeclarationRef
    # None means the configured DEFAULT_HANDLER_PRIORITY; higher runs first.
    priority: int | None = None
    is_async: bool = False
