"""Two-pointer traversal of two sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def two_pointers(
    a: Iterable[T], b: Iterable[T], cond: Callable[[T, T], bool]
) -> Iterator[tuple[T, T]]:
    """Yield pairs visited by the two-pointer method.

    For each element of ``a`` the pointer into ``b`` advances while
    ``cond(a_item, b_item)`` is false and ``b`` has more elements.
    """
    b = list(b)
    j = 0
    for ai in a:
        yield ai, b[j]
        while j < len(b) - 1 and not cond(ai, b[j]):
            j += 1
            yield ai, b[j]