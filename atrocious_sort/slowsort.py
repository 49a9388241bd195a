"""Slowsort: multiply and surrender."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _slowsort(arr: MutableSequence[Any], start: int, end: int) -> None:
    if start >= end:
        return
    middle = (start + end) // 2
    _slowsort(arr, start, middle)
    _slowsort(arr, middle + 1, end)
    if arr[middle] > arr[end]:
        arr[middle], arr[end] = arr[end], arr[middle]
    _slowsort(arr, start, end - 1)


def slowsort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place in ascending order.

    Both halves are sorted recursively, the larger of their last elements is
    moved to the end, and the rest of the sequence is then sorted again.
    """
    _slowsort(arr, 0, len(arr) - 1)