"""Lower and upper bounds in sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def upper_bound(a: Sequence[Any], x: Any) -> int:
    """Return the first index ``i`` with ``a[i] > x``."""
    start, size = 0, len(a)
    while size > 0:
        half = size // 2
        mid = start + half
        if x < a[mid]:
            size = half
        else:
            size -= half + 1
            start = mid + 1
    return start


def lower_bound(a: Sequence[Any], x: Any) -> int:
    """Return the first index ``i`` with ``a[i] >= x``."""
    start, size = 0, len(a)
    while size > 0:
        half = size // 2
        mid = start + half
        if a[mid] < x:
            size -= half + 1
            start = mid + 1
        else:
            size = half
    return start


def bisect_right(a: Sequence[Any], x: Any) -> int:
    """Return the index after the last element ``<= x``."""
    start, end = 0, len(a)
    while start < end:
        mid = (start + end) // 2
        if x < a[mid]:
            end = mid
        else:
            start = mid + 1
    return start