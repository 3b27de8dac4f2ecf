# journeykit/identity/utils.py
"""
Pure naming helpers used by the identity resolver.

- Declaration short names (`declaration_name`)
- Event type derivation from class names (`derive_event_type`)
- Kebab-cased identifiers (`kebab_case`)
"""

import re
from typing import Any

__all__ = [
    "declaration_name",
    "derive_event_type",
    "kebab_case",
]

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[-_\s]+")


def declaration_name(obj: Any) -> str:
    """Short name of a class or function; ``str(obj)`` for anything else."""
    return getattr(obj, "__name__", None) or str(obj)


def derive_event_type(class_name: str) -> str:
    """Derive a dotted event type from an event class name.

    >>> derive_event_type("TransactionRecordedEvent")
    'transaction.recorded'
    >>> derive_event_type("HTTPRequestFailedEvent")
    'http.request.failed'
    """
    base = class_name[: -len("Event")] if class_name.endswith("Event") and class_name != "Event" else class_name
    hyphenated = _ACRONYM_WORD.sub(r"\1-\2", _LOWER_UPPER.sub(r"\1-\2", base))
    return _SEPARATORS.sub(".", hyphenated.lower()).strip(".")


def kebab_case(value: str) -> str:
    """``"Investment Management"`` -> ``"investment-management"``."""
    hyphenated = _ACRONYM_WORD.sub(r"\1-\2", _LOWER_UPPER.sub(r"\1-\2", value.strip()))
    return _SEPARATORS.sub("-", hyphenated.lower()).strip("-")
