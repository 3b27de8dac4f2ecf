from .metadata import StepMetadata
from .registry import StepRegistry

__all__ = ["StepMetadata", "StepRegistry"]
