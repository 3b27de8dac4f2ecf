from .metadata import MilestoneMetadata
from .registry import MilestoneRegistry

__all__ = ["MilestoneMetadata", "MilestoneRegistry"]
