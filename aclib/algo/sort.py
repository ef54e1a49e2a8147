"""Classic in-place comparison sorts."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with bubble sort (stable, O(n^2))."""
    n = len(data)
    for i in range(n):
        for j in range(1, n - i):
            if data[j - 1] > data[j]:
                data[j - 1], data[j] = data[j], data[j - 1]


def selection_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with selection sort (O(n^2))."""
    n = len(data)
    for i in range(n):
        end = n - i
        # the last of equal maxima is chosen
        argmax = max(reversed(range(end)), key=data.__getitem__)
        data[end - 1], data[argmax] = data[argmax], data[end - 1]


def insertion_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with insertion sort (stable, O(n + inversions))."""
    for i in range(len(data)):
        j = i
        while j > 0 and data[j - 1] > data[j]:
            data[j - 1], data[j] = data[j], data[j - 1]
            j -= 1


def _larger_child(data: MutableSequence[Any], p: int, n: int) -> int:
    left, right = 2 * p + 1, 2 * p + 2
    if left >= n:
        return p
    large = left if right >= n or data[left] > data[right] else right
    return p if data[p] > data[large] else large


def _sift_down(data: MutableSequence[Any], j: int, n: int) -> None:
    child = _larger_child(data, j, n)
    while child != j:
        data[j], data[child] = data[child], data[j]
        j = child
        child = _larger_child(data, j, n)


def heap_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with heap sort (O(n log n))."""
    n = len(data)
    for i in reversed(range(n // 2)):
        _sift_down(data, i, n)
    for i in range(n):
        last = n - i - 1
        data[0], data[last] = data[last], data[0]
        _sift_down(data, 0, last)


def _merge_sort(data: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _merge_sort(data, lo, mid)
    _merge_sort(data, mid, hi)
    left, right = list(data[lo:mid]), list(data[mid:hi])
    for i in reversed(range(lo, hi)):
        if left and (not right or left[-1] > right[-1]):
            data[i] = left.pop()
        else:
            data[i] = right.pop()


def merge_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with merge sort (stable, O(n log n))."""
    _merge_sort(data, 0, len(data))


def _quick_sort(data: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo < 2:
        return
    pivot = (lo + hi) // 2
    left, right = lo, hi - 1
    while left < right:
        while data[left] < data[pivot]:
            left += 1
        while data[pivot] < data[right]:
            right -= 1
        if left == pivot:
            pivot = right
        elif right == pivot:
            pivot = left
        data[left], data[right] = data[right], data[left]
    _quick_sort(data, lo, left)
    _quick_sort(data, right, hi)


def quick_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with quick sort (O(n log n) expected).

    The partition scheme assumes distinct values; equal elements may
    prevent it from terminating.
    """
    _quick_sort(data, 0, len(data))