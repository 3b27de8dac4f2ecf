from .metadata import AttributeMetadata
from .registry import AttributeRegistry, DeclaresAttributes

__all__ = ["AttributeMetadata", "AttributeRegistry", "DeclaresAttributes"]
