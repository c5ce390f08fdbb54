"""FrozenMap — the immutable lookup table behind every registry.

Entries are kept as a sorted tuple of (key, value) pairs plus a parallel
tuple of keys, so lookups are a binary search (O(log n)) and iteration
order is deterministic. Instances are built once at import time and are
safe to read from any number of threads.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, final

from finident.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class FrozenMap[K, V]:
    """Immutable sorted mapping with binary-search lookups."""

    _entries: tuple[tuple[K, V], ...]
    _keys: tuple[K, ...] = field(init=False, repr=False, compare=False)

    EMPTY: ClassVar[FrozenMap[Any, Any]]  # Assigned after class definition

    def __post_init__(self) -> None:
        object.__setattr__(self, "_keys", tuple(k for k, _ in self._entries))

    @staticmethod
    def create(items: Mapping[K, V] | Iterable[tuple[K, V]]) -> Ok[FrozenMap[K, V]] | Err[str]:
        """Create a FrozenMap from a mapping or iterable of pairs.

        Duplicate keys: last value wins. Non-comparable keys: Err.
        """
        d = dict(items.items()) if isinstance(items, Mapping) else dict(items)
        try:
            entries = tuple(sorted(d.items(), key=lambda kv: kv[0]))
        except TypeError as e:
            return Err(f"FrozenMap keys must be comparable: {e}")
        return Ok(FrozenMap(_entries=entries))

    @staticmethod
    def of(items: Mapping[K, V]) -> FrozenMap[K, V]:
        """Build from a literal table at import time; raises on bad keys."""
        match FrozenMap.create(items):
            case Ok(m):
                return m
            case Err(e):
                raise TypeError(e)
        raise AssertionError("unreachable")

    def _index(self, key: object) -> int:
        try:
            i = bisect_left(self._keys, key)  # type: ignore[arg-type]
        except TypeError:
            return -1
        if i < len(self._keys) and self._keys[i] == key:
            return i
        return -1

    def get(self, key: K, default: V | None = None) -> V | None:
        i = self._index(key)
        return self._entries[i][1] if i >= 0 else default

    def __getitem__(self, key: K) -> V:
        i = self._index(key)
        if i < 0:
            raise KeyError(key)
        return self._entries[i][1]

    def __contains__(self, key: object) -> bool:
        return self._index(key) >= 0

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> tuple[K, ...]:
        return self._keys

    def items(self) -> tuple[tuple[K, V], ...]:
        return self._entries

    def to_dict(self) -> dict[K, V]:
        return dict(self._entries)


FrozenMap.EMPTY = FrozenMap(_entries=())
