"""Stooge sort: sort two thirds, then the other two thirds, then the first again."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _stoogesort(arr: MutableSequence[Any], start: int, end: int) -> None:
    if start >= end:
        return
    if arr[start] > arr[end]:
        arr[start], arr[end] = arr[end], arr[start]
    third = (end - start + 1) // 3
    if third <= 0:
        return
    _stoogesort(arr, start, end - third)
    _stoogesort(arr, start + third, end)
    _stoogesort(arr, start, end - third)


def stoogesort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place in ascending order.

    The first and last elements are swapped if out of order, then the first two
    thirds, the last two thirds and the first two thirds again are sorted.
    """
    _stoogesort(arr, 0, len(arr) - 1)