# journeykit/registry/base.py


import logging
from collections.abc import Hashable, Iterable
from threading import RLock
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, Literal, TypeVar, overload

from asgiref.sync import sync_to_async

from journeykit.conf import JourneyKitSettings, Settings
from journeykit.exceptions import DuplicateKeyError, RegistryFrozenError, RegistryLookupError
from journeykit.identity import IdentityResolver
from journeykit.tracing import registry_span

from .indexes import SecondaryIndex
from .records import RESOLVED, Pending, RegistryEntry, Resolved

if TYPE_CHECKING:
    from .store import RegistrySet

logger = logging.getLogger(__name__)

M = TypeVar("M")

_STANDALONE_IDENTITY = IdentityResolver()


def owner_key(owner: Any) -> Hashable:
    """Hashable identity for an owner; unhashable owners are keyed by ``id()``."""
    try:
        hash(owner)
    except TypeError:
        return ("id", id(owner))
    return owner


class IndexView(Generic[M]):
    """Read-only view over one secondary index that yields entries, not keys."""

    __slots__ = ("_registry", "_index")

    def __init__(self, registry: "KeyedRegistry[M]", index: SecondaryIndex) -> None:
        self._registry = registry
        self._index = index

    @property
    def name(self) -> str:
        return self._index.name

    def get(self, value: str) -> list[RegistryEntry[M]]:
        return self._registry._entries_for(self._index.keys_for(value))

    def values(self) -> tuple[str, ...]:
        with self._registry._lock:
            return self._index.values()

    def counts(self) -> dict[str, int]:
        with self._registry._lock:
            return self._index.counts()

    def __contains__(self, value: object) -> bool:
        return value in self._index


class KeyedRegistry(Generic[M]):
    """Registry of metadata records keyed by a unique string.

    Besides the primary ``key -> entry`` map every registry maintains an owner
    index (declaration identity -> keys) and the named secondary indexes
    returned by :meth:`build_indexes`. Subclasses customise the key via
    :meth:`key_for`, reject bad records in :meth:`prepare` and may start
    entries out :class:`~journeykit.registry.records.Pending` through
    :meth:`entry_state`.
    """

    kind: ClassVar[str] = "component"
    label: ClassVar[str] = "COMPONENT"

    def __init__(self, *, registries: "RegistrySet | None" = None, settings: Settings | None = None) -> None:
        self._lock = RLock()
        self._store: dict[str, RegistryEntry[M]] = {}
        self._owners: dict[Hashable, list[str]] = {}
        self._indexes: dict[str, SecondaryIndex] = {ix.name: ix for ix in self.build_indexes()}
        self._frozen = False
        self._registries = registries
        self._settings = settings

    # --- wiring ---

    @property
    def registries(self) -> "RegistrySet | None":
        """The :class:`RegistrySet` this registry belongs to, if any."""
        return self._registries

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = self._registries.settings if self._registries is not None else Settings()
        return self._settings

    @property
    def config(self) -> JourneyKitSettings:
        """Validated settings; see :meth:`Settings.typed`."""
        return self.settings.typed()

    def sibling(self, kind: str) -> "KeyedRegistry[Any] | None":
        """Registry of another kind from the same set, or ``None`` when standalone."""
        if self._registries is None:
            return None
        return self._registries.registry(kind)

    @property
    def identity(self) -> IdentityResolver:
        if self._registries is not None:
            return self._registries.identity
        return _STANDALONE_IDENTITY

    def ref_key(self, kind: str, value: Any) -> str | None:
        """Key of the ``kind`` declaration ``value`` refers to (declaration name as last resort)."""
        return self.identity.resolve_or_name(kind, value)

    def ref_keys(self, kind: str, values: Iterable[Any] | None) -> list[str]:
        return [key for key in (self.ref_key(kind, v) for v in values or ()) if key is not None]

    # --- hooks ---

    def build_indexes(self) -> Iterable[SecondaryIndex]:
        return ()

    def key_for(self, metadata: M, owner: Any) -> str:
        return getattr(metadata, "name")

    def prepare(self, metadata: M, owner: Any, options: dict[str, Any]) -> None:
        """Validate/normalise ``metadata`` before insertion. Raise to reject."""

    def entry_state(self, metadata: M, owner: Any, options: dict[str, Any]) -> Pending | Resolved:
        return RESOLVED

    def after_register(self, entry: RegistryEntry[M]) -> None:
        """Called under the registry lock once ``entry`` is stored and indexed."""

    def on_clear(self) -> None:
        """Reset subclass state (counters, working sets) during :meth:`clear`."""

    # --- registration ---

    def register(self, metadata: M, owner: Any = None, **options: Any) -> RegistryEntry[M]:
        """
        Register ``metadata`` produced for the declaration ``owner``.

        The record is stored under :meth:`key_for`, added to the owner index and
        to every secondary index it has a value for.

        :param metadata: The metadata record to store.
        :param owner: Declaration identity (class, function or label). Defaults
                      to the computed key.
        :param options: Kind-specific registration options (e.g. ``parent``).
        :return: The stored entry.
        :raises DuplicateKeyError: If the key is already registered; the first
                                   entry is left untouched.
        :raises RegistryFrozenError: If the registry is frozen.
        """
        with registry_span(self.kind, "register") as current:
            self.prepare(metadata, owner, options)
            with self._lock:
                self._ensure_mutable()
                key = self.key_for(metadata, owner)
                if key in self._store:
                    raise DuplicateKeyError(self.kind, key)
                entry = RegistryEntry(
                    key=key,
                    metadata=metadata,
                    owner=owner if owner is not None else key,
                    state=self.entry_state(metadata, owner, options),
                )
                self._store[key] = entry
                self._owners.setdefault(owner_key(entry.owner), []).append(key)
                self._index_entry(entry)
                self.after_register(entry)
            current.set_attribute("journeykit.key", key)
            current.set_attribute("journeykit.pending", entry.is_pending)

        logger.debug("[%s] registered `%s`%s", self.label, key, " (pending)" if entry.is_pending else "")
        return entry

    async def aregister(self, metadata: M, owner: Any = None, **options: Any) -> RegistryEntry[M]:
        """Async wrapper around :meth:`register`."""
        return await sync_to_async(self.register)(metadata, owner, **options)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"{self.kind} registry is frozen")

    def _index_entry(self, entry: RegistryEntry[M]) -> None:
        """Insert ``entry`` into every index it has a value for. Idempotent."""
        with self._lock:
            for index in self._indexes.values():
                for value in index.values_for(entry.metadata):
                    if index.add(value, entry.key):
                        index.sort(value, self._metadata_for)

    def _metadata_for(self, key: str) -> M:
        return self._store[key].metadata

    def _entries_for(self, keys: Iterable[str]) -> list[RegistryEntry[M]]:
        with self._lock:
            return [self._store[k] for k in keys if k in self._store]

    # --- retrieval ---

    def get(self, key: str) -> RegistryEntry[M] | None:
        with self._lock:
            return self._store.get(key)

    async def aget(self, key: str) -> RegistryEntry[M] | None:
        """Async wrapper around :meth:`get`."""
        return await sync_to_async(self.get)(key)

    def require(self, key: str) -> RegistryEntry[M]:
        """
        Return the entry registered under ``key``.

        :raises RegistryLookupError: If nothing is registered under ``key``.
        """
        with self._lock:
            try:
                return self._store[key]
            except KeyError as err:
                raise RegistryLookupError(f"[{self.kind}] {key!r} not found or not registered") from err

    def get_by_owner(self, owner: Any) -> list[RegistryEntry[M]]:
        """Entries registered for the declaration ``owner``, in registration order."""
        with self._lock:
            return self._entries_for(self._owners.get(owner_key(owner), ()))

    def index(self, name: str) -> IndexView[M]:
        try:
            return IndexView(self, self._indexes[name])
        except KeyError as err:
            raise RegistryLookupError(f"[{self.kind}] has no index named {name!r}") from err

    def lookup(self, index_name: str, value: str) -> list[RegistryEntry[M]]:
        return self.index(index_name).get(value)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        return self.count()

    # --- counting ---

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    async def acount(self) -> int:
        return await sync_to_async(self.count)()

    # --- enumerate all entries ---

    def all(self) -> list[RegistryEntry[M]]:
        """All entries in registration order."""
        with self._lock:
            return list(self._store.values())

    async def aall(self) -> list[RegistryEntry[M]]:
        """Async wrapper around `all`."""
        return await sync_to_async(self.all)()

    @overload
    def keys(self) -> tuple[str, ...]: ...
    @overload
    def keys(self, *, as_csv: Literal[True]) -> str: ...
    @overload
    def keys(self, *, as_csv: Literal[False]) -> tuple[str, ...]: ...

    def keys(self, *, as_csv: bool = False):
        """
        Return all registered keys.

        When `as_csv` is True, returns a comma-separated string of the keys for
        logging/debugging purposes.
        """
        with self._lock:
            keys_tuple = tuple(self._store.keys())
        if as_csv:
            return ",".join(keys_tuple)
        return keys_tuple

    # --- filtering ---

    def filter(self, pred: Callable[[M], bool]) -> list[RegistryEntry[M]]:
        """Return all entries whose metadata matches predicate `pred`."""
        with self._lock:
            return [e for e in self._store.values() if pred(e.metadata)]

    # --- stats ---

    def stats(self) -> dict[str, Any]:
        with self._lock:
            data: dict[str, Any] = {"total": len(self._store)}
            for name, index in self._indexes.items():
                data[f"by_{name}"] = index.counts()
            return data

    def get_stats(self) -> dict[str, Any]:
        return self.stats()

    # --- mutation / control ---

    def clear(self) -> None:
        """
        Empty the primary map, the owner index, every secondary index and any
        subclass state. Raises :class:`RegistryFrozenError` when frozen.
        """
        with self._lock:
            self._ensure_mutable()
            self._store.clear()
            self._owners.clear()
            for index in self._indexes.values():
                index.clear()
            self.on_clear()
        logger.debug("[%s] cleared", self.label)

    async def aclear(self) -> None:
        """Async: clear the registry if not frozen."""
        return await sync_to_async(self.clear)()

    def freeze(self) -> None:
        """Mark the registry as frozen (no further mutations)."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<{type(self).__name__} kind={self.kind!r} count={len(self._store)}>"


__all__ = ["IndexView", "KeyedRegistry", "owner_key"]
