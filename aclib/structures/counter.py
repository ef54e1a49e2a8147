"""A dictionary that counts occurrences of hashable elements."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(dict, Generic[T]):
    """Mapping from element to the number of times it was counted."""

    def __init__(self, data: Iterable[T] = ()) -> None:
        super().__init__()
        for elem in data:
            self.count(elem)

    def count(self, elem: T) -> None:
        """Count one more occurrence of ``elem``."""
        self[elem] = self.get(elem, 0) + 1

    def remove(self, elem: T) -> None:
        """Remove one occurrence of ``elem``; drop it when none remain."""
        if elem in self:
            self[elem] -= 1
            if self[elem] <= 0:
                del self[elem]

    def counted(self, elem: T) -> int:
        """Number of occurrences of ``elem`` (0 if never counted)."""
        return self.get(elem, 0)

    def most_common(self) -> list[tuple[T, int]]:
        """All ``(element, count)`` pairs in descending order of count."""
        return sorted(self.items(), key=lambda pair: pair[1], reverse=True)