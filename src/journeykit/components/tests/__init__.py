from .metadata import TestMetadata, TestStatus
from .registry import TestRegistry

__all__ = ["TestMetadata", "TestRegistry", "TestStatus"]
