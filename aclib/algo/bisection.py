"""Binary search over monotone predicates and sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _midpoint(start: Any, end: Any, unit: Any) -> Any:
    if all(isinstance(v, int) for v in (start, end, unit)):
        return (start + end) // 2
    return (start + end) / 2


def initial_indices(
    pred: Callable[[Any], bool],
    start: Any = None,
    stop: Any = None,
    inclusive: bool = False,
) -> tuple[Any, Any]:
    """Return ``(start, end)`` bracketing the point where ``pred`` turns true.

    ``None`` for ``start`` or ``stop`` means unbounded; the bound is then
    guessed by doubling steps, which does not terminate if ``pred`` is not
    monotone.  ``stop`` is excluded unless ``inclusive`` is true.
    """
    if start is None:
        start, step = 0, 1
        while pred(start):
            step += step
            start -= step
    if stop is None:
        low, step = start, 1
        while True:
            end = start + step
            if pred(end):
                return low, end
            low = end
            step += step
    if inclusive:
        return start, stop
    return start, (stop - 1 if stop > 1 else 0)


def bisect_unit(
    pred: Callable[[Any], bool],
    unit: Any,
    start: Any = None,
    stop: Any = None,
    inclusive: bool = False,
) -> Any | None:
    """Find the first point (to a width of ``unit``) where ``pred`` becomes true.

    Returns ``None`` if ``pred`` is already true at the start, still false at
    the end, or the range holds fewer than two points.
    """
    start, end = initial_indices(pred, start, stop, inclusive)
    if start >= end or pred(start) or not pred(end):
        return None
    while end - start > unit:
        mid = _midpoint(start, end, unit)
        if pred(mid):
            end = mid
        else:
            start = mid
    return end


def bisect(
    pred: Callable[[int], bool],
    start: int | None = None,
    stop: int | None = None,
    inclusive: bool = False,
) -> int | None:
    """Find the first integer where ``pred`` changes from false to true."""
    return bisect_unit(pred, 1, start, stop, inclusive)


def sqrt_ceil(x: int) -> int:
    """Integer square root of ``x`` rounded up."""
    found = bisect(lambda i: i * i >= x, 1, x, inclusive=True)
    return x if found is None else found


def sqrt_floor(x: int) -> int:
    """Integer square root of ``x`` rounded down."""
    found = bisect(lambda i: i * i > x, 1, x, inclusive=True)
    return (x + 1 if found is None else found) - 1


def log_ceil(a: int, x: int) -> int:
    """Logarithm of ``x`` in base ``a`` rounded up."""
    found = bisect(lambda i: a**i >= x, 1, x)
    if found is not None:
        return found
    return 0 if a > x else 1


def log_floor(a: int, x: int) -> int:
    """Logarithm of ``x`` in base ``a`` rounded down."""
    found = bisect(lambda i: a**i > x, 1, x)
    if found is None:
        found = 1 if a > x else 2
    return found - 1


def bisect_left_by_key(a: Sequence[T], x: Any, key: Callable[[T], Any]) -> int:
    """Leftmost insertion index of ``x`` in ``a`` ordered by ``key``."""
    found = bisect(lambda i: i < len(a) and key(a[i]) >= x, 0, len(a))
    if found is not None:
        return found
    if a and key(a[-1]) < x:
        return len(a)
    return 0


def bisect_left(a: Sequence[T], x: T) -> int:
    """Leftmost insertion index of ``x`` in sorted ``a``."""
    return bisect_left_by_key(a, x, lambda k: k)


def bisect_right_by_key(a: Sequence[T], x: Any, key: Callable[[T], Any]) -> int:
    """Rightmost insertion index of ``x`` in ``a`` ordered by ``key``."""
    found = bisect(lambda i: i < len(a) and key(a[i]) > x, 0, len(a))
    if found is not None:
        return found
    if a and key(a[-1]) <= x:
        return len(a)
    return 0


def bisect_right(a: Sequence[T], x: T) -> int:
    """Rightmost insertion index of ``x`` in sorted ``a``."""
    return bisect_right_by_key(a, x, lambda k: k)