from .metadata import DomainEventMetadata, EventHandlerMetadata
from .registry import EventRegistry, HandlerRegistry

__all__ = ["DomainEventMetadata", "EventHandlerMetadata", "EventRegistry", "HandlerRegistry"]
