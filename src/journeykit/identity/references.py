"""Declaration references.

A reference is what one metadata record uses to point at another declaration:
either the declaration object itself (a class or function) or its string name.
:meth:`Reference.of` classifies a raw value once, at the boundary, so the
registries never have to sniff types again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from journeykit.exceptions import IdentityResolutionError

__all__ = ["ByIdentity", "ByName", "Reference"]


class Reference:
    """Tagged union: :class:`ByIdentity` or :class:`ByName`."""

    __slots__ = ()

    @staticmethod
    def of(value: Any) -> "ByIdentity | ByName | None":
        """Classify ``value``; ``None`` and empty strings map to ``None``.

        :raises IdentityResolutionError: for values that are neither strings nor
            declaration objects (classes, functions).
        """
        if value is None:
            return None
        if isinstance(value, Reference):
            return value  # type: ignore[return-value]
        if isinstance(value, str):
            name = value.strip()
            return ByName(name) if name else None
        if isinstance(value, type) or callable(value):
            return ByIdentity(value)
        raise IdentityResolutionError(f"Cannot build a reference from {value!r} ({type(value).__name__})")


@dataclass(frozen=True, slots=True)
class ByIdentity(Reference):
    handle: Any

    @property
    def name(self) -> str:
        return getattr(self.handle, "__name__", None) or str(self.handle)


@dataclass(frozen=True, slots=True)
class ByName(Reference):
    name: str
