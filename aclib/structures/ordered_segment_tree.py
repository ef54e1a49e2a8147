"""Segment tree that keeps operand order, for non-commutative monoids."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class OrderedSegmentTree:
    """Iterative segment tree stored as a 1-indexed array.

    Queries fold the left and right halves separately, so ``op`` only has
    to be associative, not commutative (string concatenation works).
    ``identity`` is a factory returning the neutral element, so mutable
    values are never shared between nodes.
    """

    def __init__(
        self,
        data: Iterable[Any],
        identity: Callable[[], Any],
        op: Callable[[Any, Any], Any],
    ) -> None:
        data = list(data)
        self._n = len(data)
        self._e = identity
        self._op = op
        offset = _next_power_of_two(self._n)
        self._tree: list[Any] = [identity() for _ in range(2 * offset)]
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

    def __setitem__(self, index: int, value: Any) -> None:
        k = range(self._n)[index]
        self._tree[self.leaf_offset() + k] = value
        self.update_parents(k)

    def __repr__(self) -> str:
        return f"OrderedSegmentTree({self[:]!r})"

    def leaf_offset(self) -> int:
        """Array index of the first leaf."""
        return _next_power_of_two(self._n)

    def update(self, k: int, x: Any) -> Any:
        """Set leaf ``k`` to ``x``; return the previous value."""
        return self.update_with(k, lambda _: x)

    def update_with(self, k: int, f: Callable[[Any], Any]) -> Any:
        """Replace leaf ``k`` by ``f(leaf)``; return the previous value."""
        if not 0 <= k < self._n:
            raise IndexError(f"index {k} is out of 0..{self._n}")
        present = self[k]
        self[k] = f(present)
        return present

    def swap(self, k: int, l: int) -> None:
        """Exchange leaves ``k`` and ``l``."""
        offset = self.leaf_offset()
        a, b = offset + k, offset + l
        self._tree[a], self._tree[b] = self._tree[b], self._tree[a]
        self.update_parents(k)
        self.update_parents(l)

    def update_parents(self, k: int) -> None:
        """Recompute every ancestor of leaf ``k``."""
        current = self.leaf_offset() + k
        while current // 2 > 0:
            current //= 2
            self._tree[current] = self._op(
                self._tree[2 * current], self._tree[2 * current + 1]
            )

    def query(self, l: int, r: int) -> Any:
        """Fold ``op`` in order over the half-open leaf interval ``[l, r)``."""
        offset = self.leaf_offset()
        li, ri = offset + l, offset + r
        result_left, result_right = self._e(), self._e()
        while li < ri:
            if li % 2 == 1:
                result_left = self._op(result_left, self._tree[li])
                li += 1
            if ri % 2 == 1:
                result_right = self._op(self._tree[ri ^ 1], result_right)
            li //= 2
            ri //= 2
        return self._op(result_left, result_right)

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