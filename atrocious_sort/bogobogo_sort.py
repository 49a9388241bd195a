"""Bogobogo sort: bogo sort on ever longer prefixes, starting over on any failure."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def _is_sorted(items: Sequence[Any]) -> bool:
    return all(a <= b for a, b in pairwise(items))


def bogobogo_sort(arr: list[Any]) -> None:
    """Sort ``arr`` in place in ascending order.

    Prefixes of length 2, 3, 4 and so on are shuffled once each; as soon as a
    shuffled prefix is not sorted, the whole process starts again from length 2.
    """
    length = 2
    while length <= len(arr):
        prefix = arr[:length]
        random.shuffle(prefix)
        arr[:length] = prefix
        length = length + 1 if _is_sorted(prefix) else 2