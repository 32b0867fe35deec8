"""Insertion-ordered set with identity-friendly membership and helpers."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def erase_if(items: List[T], pred: Callable[[T], bool]) -> None:
    """Remove, in place, every element of ``items`` for which ``pred`` is true."""
    items[:] = [item for item in items if not pred(item)]


class OrderedSet(Generic[T]):
    """A set that remembers insertion order and supports positional access.

    Membership is decided by hashing, so objects with the default identity
    hash are compared by identity even if they overload ``==``.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: dict = {}
        self._order_cache: Optional[List[T]] = None
        if items is not None:
            self.extend(items)

    def _invalidate(self) -> None:
        self._order_cache = None

    def add(self, item: T) -> bool:
        """Append ``item`` if absent; return True if it was added."""
        if item in self._items:
            return False
        self._items[item] = None
        self._invalidate()
        return True

    def discard(self, item: T) -> bool:
        """Remove ``item`` if present; return True if it was removed."""
        if item not in self._items:
            return False
        del self._items[item]
        self._invalidate()
        return True

    def extend(self, items: Iterable[T]) -> None:
        """Add every element of ``items`` in order, skipping duplicates."""
        for item in items:
            self.add(item)

    def does_intersect(self, other: "OrderedSet[T]") -> bool:
        """Return True if the two sets share at least one element."""
        smaller, larger = (other, self) if len(other) < len(self) else (self, other)
        return any(item in larger for item in smaller)

    def clear(self) -> None:
        self._items.clear()
        self._invalidate()

    def _ordered(self) -> List[T]:
        if self._order_cache is None:
            self._order_cache = list(self._items)
        return self._order_cache

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._ordered()[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"