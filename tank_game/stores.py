"""
Entity stores

Entities are never spliced out mid-iteration. Systems flip ``alive`` to
False (a tombstone) and the owning pass calls ``compact`` once it is done,
so indices never shift under a running loop and a dead entity is skipped by
every later reader in the same tick.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class EntityStore(Generic[T]):
    """Growable collection of entities carrying an ``alive`` flag"""

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)

    def add(self, item: T) -> T:
        self._items.append(item)
        return item

    def extend(self, items: Iterable[T]) -> None:
        self._items.extend(items)

    def __iter__(self) -> Iterator[T]:
        # Iterate a copy so systems may add entities while walking the store
        for item in tuple(self._items):
            if item.alive:
                yield item

    def __len__(self) -> int:
        return sum(1 for item in self._items if item.alive)

    def __bool__(self) -> bool:
        return any(item.alive for item in self._items)

    def compact(self) -> int:
        """Drop tombstoned entities, returning how many were removed"""
        before = len(self._items)
        self._items = [item for item in self._items if item.alive]
        return before - len(self._items)

    def clear(self) -> None:
        self._items = []

    def items(self) -> Tuple[T, ...]:
        """Live entities in insertion order"""
        return tuple(item for item in self._items if item.alive)
