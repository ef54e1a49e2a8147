"""A list that keeps its elements in ascending order."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Iterator
from heapq import merge
from typing import Any, overload


class SortedVec:
    """Sorted list backed by a Python list; duplicates are kept."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._items: list[Any] = sorted(iterable)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SortedVec({self._items!r})"

    def insert(self, element: Any) -> None:
        """Insert ``element`` at its sorted position."""
        insort(self._items, element)

    def extend(self, items: Iterable[Any]) -> None:
        """Merge ``items`` into the list, keeping it sorted."""
        self._items = list(merge(self._items, sorted(items)))

    def _check_count(self, k: int) -> None:
        if not 0 <= k <= len(self._items):
            raise IndexError(f"cannot take {k} elements from {len(self._items)}")

    def max_elements(self, k: int) -> list[Any]:
        """The ``k`` largest elements in ascending order."""
        self._check_count(k)
        return self._items[len(self._items) - k :]

    def min_elements(self, k: int) -> list[Any]:
        """The ``k`` smallest elements in ascending order."""
        self._check_count(k)
        return self._items[:k]