from .metadata import BoundedContextMetadata
from .registry import BoundedContextRegistry, RelatedContext

__all__ = ["BoundedContextMetadata", "BoundedContextRegistry", "RelatedContext"]
