"""Named secondary indexes over registry keys."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

__all__ = ["SecondaryIndex"]

Extractor = Callable[[Any], "str | Iterable[str] | None"]


class SecondaryIndex:
    """Map of ``value -> [key, ...]`` derived from a metadata field.

    Buckets preserve insertion order. When ``order_by`` is given the bucket is
    re-sorted (stable) with that key function after every insertion, so ties
    keep insertion order.

    Not thread-safe on its own; the owning registry holds the lock.
    """

    __slots__ = ("name", "_extract", "order_by", "_buckets")

    def __init__(
        self,
        name: str,
        extract: Extractor,
        *,
        order_by: Callable[[Any], Any] | None = None,
    ) -> None:
        self.name = name
        self._extract = extract
        self.order_by = order_by
        self._buckets: dict[str, list[str]] = {}

    def values_for(self, metadata: Any) -> tuple[str, ...]:
        raw = self._extract(metadata)
        if raw is None:
            return ()
        if isinstance(raw, str):
            return (raw,) if raw else ()
        return tuple(v for v in raw if v)

    def add(self, value: str, key: str) -> bool:
        """Add ``key`` under ``value``; returns ``False`` when already present."""
        bucket = self._buckets.setdefault(value, [])
        if key in bucket:
            return False
        bucket.append(key)
        return True

    def sort(self, value: str, lookup: Callable[[str], Any]) -> None:
        if self.order_by is None:
            return
        bucket = self._buckets.get(value)
        if bucket:
            bucket.sort(key=lambda k: self.order_by(lookup(k)))

    def keys_for(self, value: str) -> tuple[str, ...]:
        return tuple(self._buckets.get(value, ()))

    def values(self) -> tuple[str, ...]:
        return tuple(self._buckets)

    def counts(self) -> dict[str, int]:
        return {value: len(keys) for value, keys in self._buckets.items()}

    def clear(self) -> None:
        self._buckets.clear()

    def __contains__(self, value: object) -> bool:
        return value in self._buckets

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"SecondaryIndex({self.name!r}, values={len(self._buckets)})"
