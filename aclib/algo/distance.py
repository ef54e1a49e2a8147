"""Distances between sequences and points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest
from typing import Any


def hamming_distance(a: Iterable[Any], b: Iterable[Any]) -> int:
    """Number of positions at which ``a`` and ``b`` differ."""
    return sum(x != y for x, y in zip(a, b))


def levenshtein_distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Edit distance between sequences ``a`` and ``b``."""
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        return max(n, m)
    dp = [[0] * m for _ in range(n)]
    dp[0][0] = 0 if a[0] == b[0] else 1
    for i in range(1, n):
        keep = dp[i - 1][0] == i and a[i] == b[0]
        dp[i][0] = dp[i - 1][0] + (0 if keep else 1)
    for j in range(1, m):
        keep = dp[0][j - 1] == j and a[0] == b[j]
        dp[0][j] = dp[0][j - 1] + (0 if keep else 1)
    for i in range(1, n):
        for j in range(1, m):
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + (0 if a[i] == b[j] else 1),
            )
    return dp[n - 1][m - 1]


def manhattan_distance_2d(p1: tuple[int, int], p2: tuple[int, int]) -> int:
    """Manhattan distance between two 2-D points."""
    (x1, y1), (x2, y2) = p1, p2
    return abs(x1 - x2) + abs(y1 - y2)


def rotate_45(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Rotate points by 45 degrees so Manhattan distance becomes Chebyshev distance."""
    return [(x - y, x + y) for x, y in points]


def chebyshev_distance_2d(p1: tuple[int, int], p2: tuple[int, int]) -> int:
    """Chebyshev distance between two 2-D points."""
    (x1, y1), (x2, y2) = p1, p2
    return max(abs(x1 - x2), abs(y1 - y2))


def manhattan_distance(p1: Iterable[int], p2: Iterable[int]) -> int:
    """Manhattan distance in n dimensions; missing coordinates count as 0."""
    return sum(abs(l - r) for l, r in zip_longest(p1, p2, fillvalue=0))


def chebyshev_distance(p1: Iterable[int], p2: Iterable[int]) -> int:
    """Chebyshev distance in n dimensions; missing coordinates count as 0."""
    return max((abs(l - r) for l, r in zip_longest(p1, p2, fillvalue=0)), default=0)