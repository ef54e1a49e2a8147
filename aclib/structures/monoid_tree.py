"""Segment tree whose nodes are values of a user-defined monoid type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


@dataclass
class Monoid(ABC):
    """A value together with an associative operation and its identity.

    Subclasses provide :meth:`identity` and :meth:`operation`; the wrapped
    value is available as ``value``.
    """

    value: Any

    @classmethod
    @abstractmethod
    def identity(cls) -> Monoid:
        """The neutral element of :meth:`operation`."""

    @classmethod
    @abstractmethod
    def operation(cls, a: Monoid, b: Monoid) -> Monoid:
        """Combine ``a`` and ``b``; must be associative."""


class MonoidSegmentTree:
    """Iterative segment tree over a :class:`Monoid` subclass.

    The tree is a 0-indexed perfect binary tree: node ``x`` has children
    ``2x + 1`` and ``2x + 2``, and leaves start at :meth:`leaf_offset`.
    Values passed in and returned are the plain values, not monoid objects.
    """

    def __init__(self, monoid: type[Monoid], data: Iterable[Any] = ()) -> None:
        data = list(data)
        self._monoid = monoid
        self._len = len(data)
        size = _next_power_of_two(self._len)
        self._tree: list[Monoid] = [monoid.identity() for _ in range(2 * size + 1)]
        offset = self.leaf_offset()
        for i, value in enumerate(data):
            self._tree[offset + i] = monoid(value)
        for i in reversed(range(offset)):
            self._tree[i] = monoid.operation(self._tree[2 * i + 1], self._tree[2 * i + 2])

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        offset = self.leaf_offset()
        leaves = [node.value for node in self._tree[offset : offset + self._len]]
        return f"MonoidSegmentTree({self._monoid.__name__}, {leaves!r})"

    def leaf_offset(self) -> int:
        """Array index of the first leaf."""
        return _next_power_of_two(self._len) - 1

    def update(self, i: int, x: Any) -> Any:
        """Set leaf ``i`` to ``x``; return the previous value."""
        return self.update_with(i, lambda _: x)

    def update_with(self, i: int, f: Callable[[Any], Any]) -> Any:
        """Replace leaf ``i`` by ``f(leaf)``; return the previous value."""
        if not 0 <= i < self._len:
            raise IndexError(f"index {i} is out of 0..{self._len}")
        node = self.leaf_offset() + i
        previous = self._tree[node]
        self._tree[node] = self._monoid(f(previous.value))
        while node > 0:
            node = (node - 1) // 2
            self._tree[node] = self._monoid.operation(
                self._tree[2 * node + 1], self._tree[2 * node + 2]
            )
        return previous.value

    def indices(self, start: int | None = None, stop: int | None = None) -> tuple[int, int]:
        """Half-open leaf interval ``[left, right)`` for ``start`` and ``stop``.

        ``None`` means unbounded; ``stop`` is clipped to the length.
        """
        left = 0 if start is None else max(start, 0)
        right = self._len if stop is None else min(stop, self._len)
        if left > right:
            raise ValueError(f"invalid range: {left}..{right}")
        return left, right

    def _fold(self, start: int | None, stop: int | None) -> Monoid:
        left, right = self.indices(start, stop)
        offset = self.leaf_offset()
        left, right = offset + left, offset + right
        op = self._monoid.operation
        left_result, right_result = self._monoid.identity(), self._monoid.identity()
        while left < right:
            if left % 2 == 0:
                left_result = op(left_result, self._tree[left])
                left += 1
            if right % 2 == 0:
                right_result = op(self._tree[right - 1], right_result)
            left = (left - 1) // 2
            right = (right - 1) // 2
        return op(left_result, right_result)

    def query(self, start: int | None = None, stop: int | None = None) -> Any:
        """Fold the monoid operation over leaves ``[start, stop)``."""
        return self._fold(start, stop).value

    def bisect(
        self,
        start: int | None,
        stop: int | None,
        cmp: Callable[[Any], bool],
        leftmost: bool = True,
    ) -> int | None:
        """Leftmost (or rightmost) leaf in ``[start, stop)`` where ``cmp`` holds, or None."""
        lo, hi = self.indices(start, stop)
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if leftmost:
                go_left = cmp(self.query(lo, mid))
            else:
                go_left = not cmp(self.query(mid, hi))
            if go_left:
                hi = mid
            else:
                lo = mid
        return lo if cmp(self._tree[self.leaf_offset() + lo].value) else None