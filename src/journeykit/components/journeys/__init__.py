from .metadata import JourneyMetadata, JourneyReference, MilestoneReference, StakeholderInteraction
from .registry import JourneyRegistry, PathItem

__all__ = [
    "JourneyMetadata",
    "JourneyReference",
    "JourneyRegistry",
    "MilestoneReference",
    "PathItem",
    "StakeholderInteraction",
]
