from .metadata import LogicMetadata, LogicReference
from .registry import LogicRegistry

__all__ = ["LogicMetadata", "LogicReference", "LogicRegistry"]
