from .metadata import ExpectationMetadata, Scenario
from .registry import ContextCheck, ExpectationRegistry

__all__ = ["ContextCheck", "ExpectationMetadata", "ExpectationRegistry", "Scenario"]
