"""Coordinate compression."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


def coordinate_compress(values: Iterable[Hashable]) -> list[int]:
    """Replace each value by its rank among the distinct values."""
    values = list(values)
    ranks = {v: i for i, v in enumerate(sorted(set(values)))}
    return [ranks[v] for v in values]