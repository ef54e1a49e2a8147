"""Segment tree over a monoid given by an identity and a binary operation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class SegmentTree:
    """Iterative segment tree stored as a 1-indexed array.

    Node ``x`` has children ``2x`` and ``2x + 1``; leaves start at
    :meth:`leaf_offset`.  ``op`` must be associative with ``identity``
    as its neutral element.
    """

    def __init__(
        self, data: Iterable[Any], identity: Any, op: Callable[[Any, Any], Any]
    ) -> None:
        data = list(data)
        self._n = len(data)
        self._e = identity
        self._op = op
        offset = _next_power_of_two(self._n)
        self._tree: list[Any] = [identity] * (2 * offset)
        self._tree[offset : offset + self._n] = data
        for i in reversed(range(1, offset)):
            self._tree[i] = op(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, index: int | slice) -> Any:
        lo = self.leaf_offset()
        if isinstance(index, slice):
            return self._tree[lo : lo + self._n][index]
        return self._tree[lo + range(self._n)[index]]

    def __repr__(self) -> str:
        return f"SegmentTree({self[:]!r})"

    def leaf_offset(self) -> int:
        """Array index of the first leaf."""
        return _next_power_of_two(self._n)

    def num_of_leaf(self) -> int:
        """Number of leaves, including padding."""
        return _next_power_of_two(self._n)

    def update(self, k: int, x: Any) -> Any:
        """Set leaf ``k`` to ``x``; return the previous value."""
        return self.update_with(k, lambda _: x)

    def update_with(self, k: int, f: Callable[[Any], Any]) -> Any:
        """Replace leaf ``k`` by ``f(leaf)``; return the previous value."""
        if not 0 <= k < self._n:
            raise IndexError(f"index {k} is out of 0..{self._n}")
        current = self.leaf_offset() + k
        present = self._tree[current]
        self._tree[current] = f(present)
        while current > 1:
            current //= 2
            self._tree[current] = self._op(
                self._tree[2 * current], self._tree[2 * current + 1]
            )
        return present

    def swap(self, k: int, l: int) -> None:
        """Exchange leaves ``k`` and ``l``."""
        element_k, element_l = self[k], self[l]
        self.update(l, element_k)
        self.update(k, element_l)

    def query(self, l: int, r: int) -> Any:
        """Fold ``op`` over the half-open leaf interval ``[l, r)``."""
        offset = self.leaf_offset()
        l, r = offset + l, offset + r
        result = self._e
        while l < r:
            if l % 2 == 1:
                result = self._op(result, self._tree[l])
                l += 1
            if r % 2 == 1:
                result = self._op(result, self._tree[r ^ 1])
            l //= 2
            r //= 2
        return result

    def bisect_left(self, l: int, r: int, cmp: Callable[[Any], bool]) -> int | None:
        """Leftmost leaf in ``[l, r)`` where ``cmp`` holds, or None."""
        lo, hi = l, r
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if cmp(self.query(lo, mid)):
                hi = mid
            else:
                lo = mid
        return lo if cmp(self._tree[self.leaf_offset() + lo]) else None

    def bisect_right(self, l: int, r: int, cmp: Callable[[Any], bool]) -> int | None:
        """Rightmost leaf in ``[l, r)`` where ``cmp`` holds, or None."""
        lo, hi = l, r
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if cmp(self.query(mid, hi)):
                lo = mid
            else:
                hi = mid
        return lo if cmp(self._tree[self.leaf_offset() + lo]) else None