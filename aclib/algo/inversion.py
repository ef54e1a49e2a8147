"""Inversion number via a Fenwick tree."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _lowbit(j: int) -> int:
    return j & -j


def inversion_number(data: Sequence[int]) -> int:
    """Count inversions of a permutation of ``0..n-1``."""
    n = len(data)
    tree = [0] * n
    total = 0
    for i, value in enumerate(data):
        prefix = 0
        j = value
        while j > 0:
            prefix += tree[j]
            j -= _lowbit(j)
        j = value
        while j < n:
            tree[j] += 1
            j += _lowbit(j) if j else 1
        total += i - prefix
    return total


def inversion_number_with(data: Sequence[Any]) -> int:
    """Count inversions of a sequence of distinct comparable values."""
    order = sorted(range(len(data)), key=data.__getitem__)
    return inversion_number(order)