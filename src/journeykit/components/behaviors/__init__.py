from .metadata import BehaviorMetadata
from .registry import BehaviorRegistry

__all__ = ["BehaviorMetadata", "BehaviorRegistry"]
