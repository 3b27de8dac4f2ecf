from .metadata import PersonaMetadata, StakeholderMetadata
from .registry import PersonaRegistry, StakeholderRegistry

__all__ = ["PersonaMetadata", "PersonaRegistry", "StakeholderMetadata", "StakeholderRegistry"]
