"""Public identity API.

References (by declaration object or by string name), the resolver that maps
them to registry keys, and the naming helpers it is built on.
"""

from .domains import SUPPORTED_KINDS, normalize_kind
from .references import ByIdentity, ByName, Reference
from .resolvers import IdentityResolver
from .utils import declaration_name, derive_event_type, kebab_case

__all__ = [
    "ByIdentity",
    "ByName",
    "IdentityResolver",
    "Reference",
    "SUPPORTED_KINDS",
    "declaration_name",
    "derive_event_type",
    "kebab_case",
    "normalize_kind",
]
