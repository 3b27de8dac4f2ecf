# journeykit/identity/resolvers.py
"""Map declaration references to canonical registry keys.

Every cross-reference in a metadata record (a persona, a stakeholder, the
event a handler listens to, a milestone a detour branches after, ...) may be
written as the declaration object itself or as its string name. The
:class:`IdentityResolver` maps both spellings to the same key:

- ``ByName`` references are taken verbatim.
- ``ByIdentity`` references are looked up by owner in the registry of the
  referenced kind (read-only), then fall back to attributes declared on the
  object, then (for kinds whose key defaults to the declaration name) to the
  object's ``__name__``.

Kinds without a name-based fallback (persona, stakeholder, bounded context,
expectation) resolve to ``None`` when the object is not registered; callers
decide whether that is an error (see :meth:`IdentityResolver.require`).
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from journeykit.exceptions import IdentityResolutionError

from .domains import (
    BEHAVIORS,
    CONTEXTS,
    EVENTS,
    EXPECTATIONS,
    JOURNEYS,
    LOGIC,
    MILESTONES,
    PERSONAS,
    STAKEHOLDERS,
    normalize_kind,
)
from .references import ByIdentity, ByName, Reference
from .utils import derive_event_type

if TYPE_CHECKING:
    from journeykit.registry.store import RegistrySet

__all__ = ["IdentityResolver"]

logger = logging.getLogger(__name__)

# kind -> (metadata attribute holding the key, fall back to declaration name)
_KEY_FIELDS: dict[str, tuple[str, bool]] = {
    PERSONAS: ("name", False),
    STAKEHOLDERS: ("role", False),
    CONTEXTS: ("name", False),
    EVENTS: ("event_type", True),
    EXPECTATIONS: ("expectation_id", False),
    BEHAVIORS: ("name", True),
    MILESTONES: ("name", True),
    JOURNEYS: ("slug", True),
    LOGIC: ("name", True),
}


class IdentityResolver:
    """Resolve references against the registries of one :class:`RegistrySet`."""

    def __init__(self, registries: "RegistrySet | None" = None) -> None:
        self._registries = registries

    # --- generic ---

    def resolve(self, kind: str, value: Any) -> str | None:
        """Canonical key for ``value`` as a reference to a ``kind`` declaration."""
        kind = normalize_kind(kind)
        try:
            attr, name_fallback = _KEY_FIELDS[kind]
        except KeyError as err:
            raise IdentityResolutionError(f"{kind!r} declarations cannot be referenced") from err

        ref = Reference.of(value)
        if ref is None:
            return None
        if isinstance(ref, ByName):
            return ref.name
        return self._from_identity(kind, attr, ref, name_fallback=name_fallback)

    def require(self, kind: str, value: Any) -> str:
        """Like :meth:`resolve` but raise :class:`IdentityResolutionError` on ``None``."""
        key = self.resolve(kind, value)
        if key is None:
            raise IdentityResolutionError(f"Cannot resolve {value!r} to a registered {kind} key")
        return key

    def resolve_many(self, kind: str, values: Iterable[Any] | None) -> list[str]:
        """Resolve every value, dropping the ones that do not resolve."""
        return [key for key in (self.resolve(kind, v) for v in values or ()) if key is not None]

    def resolve_or_name(self, kind: str, value: Any) -> str | None:
        """Like :meth:`resolve` but fall back to the declaration name for every kind."""
        key = self.resolve(kind, value)
        if key is None and value is not None:
            ref = Reference.of(value)
            return ref.name if ref is not None else None
        return key

    def _from_identity(self, kind: str, attr: str, ref: ByIdentity, *, name_fallback: bool) -> str | None:
        if self._registries is not None:
            for entry in self._registries.registry(kind).get_by_owner(ref.handle):
                value = getattr(entry.metadata, attr, None)
                if isinstance(value, str) and value:
                    return value

        declared = getattr(ref.handle, attr, None)
        if isinstance(declared, str) and declared:
            return declared

        if kind == EVENTS:
            return derive_event_type(ref.name)
        if name_fallback:
            return ref.name

        logger.debug("[IDENTITY] %s reference %r is not registered", kind, ref.handle)
        return None

    # --- per-kind helpers ---

    def persona_name(self, value: Any) -> str | None:
        return self.resolve(PERSONAS, value)

    def stakeholder_role(self, value: Any) -> str | None:
        return self.resolve(STAKEHOLDERS, value)

    def stakeholder_roles(self, values: Iterable[Any] | None) -> list[str]:
        return self.resolve_many(STAKEHOLDERS, values)

    def context_name(self, value: Any) -> str | None:
        return self.resolve(CONTEXTS, value)

    def event_type(self, value: Any) -> str | None:
        """``TransactionRecordedEvent`` -> ``"transaction.recorded"`` unless registered otherwise."""
        return self.resolve(EVENTS, value)

    def expectation_id(self, value: Any) -> str | None:
        return self.resolve(EXPECTATIONS, value)

    def behavior_name(self, value: Any) -> str | None:
        return self.resolve(BEHAVIORS, value)

    def milestone_name(self, value: Any) -> str | None:
        return self.resolve(MILESTONES, value)

    def journey_slug(self, value: Any) -> str | None:
        return self.resolve(JOURNEYS, value)

    def logic_name(self, value: Any) -> str | None:
        return self.resolve(LOGIC, value)
