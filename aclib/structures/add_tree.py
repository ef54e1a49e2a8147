"""Lazy segment tree supporting range addition and range sums."""

from __future__ import annotations

from collections.abc import Iterable


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class AddTree:
    """Segment tree of integer sums with lazy range addition.

    Nodes are 1-indexed (children ``2x`` and ``2x + 1``).  Each node holds
    its sum and a pending addition for its whole segment, which is pushed
    to the children half by half when the node is visited.
    """

    def __init__(self, data: Iterable[int]) -> None:
        data = list(data)
        self._n = len(data)
        offset = self.leaf_offset()
        self._values: list[int] = [0] * (2 * offset)
        self._lazy: list[int] = [0] * (2 * offset)
        self._values[offset : offset + self._n] = data
        for i in reversed(range(1, offset)):
            self._values[i] = self._values[2 * i] + self._values[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"AddTree(n={self._n})"

    def leaf_offset(self) -> int:
        """Array index of the first leaf."""
        return _next_power_of_two(self._n)

    def num_of_leaf(self) -> int:
        """Number of leaves, including padding."""
        return _next_power_of_two(self._n)

    def update_range(self, l: int, r: int, x: int) -> None:
        """Add ``x`` to every leaf in the half-open interval ``[l, r)``."""
        self._update(l, r, 1, 0, self.num_of_leaf(), x)

    def _update(self, l: int, r: int, node: int, lo: int, hi: int, x: int) -> None:
        self.propagation(node)
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            self._lazy[node] += x * (hi - lo)
            self.propagation(node)
            return
        mid = (lo + hi) // 2
        self._update(l, r, 2 * node, lo, mid, x)
        self._update(l, r, 2 * node + 1, mid, hi, x)
        self._values[node] = self._values[2 * node] + self._values[2 * node + 1]
        self._lazy[node] = 0

    def query(self, l: int, r: int) -> int:
        """Sum of the leaves in ``[l, r)``, applying pending additions on the way."""
        return self._query(l, r, 1, 0, self.num_of_leaf())

    def _query(self, l: int, r: int, node: int, lo: int, hi: int) -> int:
        self.propagation(node)
        if r <= lo or hi <= l:
            return 0
        if l <= lo and hi <= r:
            return self._values[node]
        mid = (lo + hi) // 2
        return self._query(l, r, 2 * node, lo, mid) + self._query(
            l, r, 2 * node + 1, mid, hi
        )

    def propagation(self, node: int) -> None:
        """Apply the pending addition of ``node`` and pass half to each child."""
        lazy = self._lazy[node]
        self._values[node] += lazy
        self._lazy[node] = 0
        if node < self.leaf_offset():
            self._lazy[2 * node] += lazy // 2
            self._lazy[2 * node + 1] += lazy // 2