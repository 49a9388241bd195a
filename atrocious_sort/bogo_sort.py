"""Bogo sort: shuffle until sorted."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def _is_sorted(items: Sequence[Any]) -> bool:
    return all(a <= b for a, b in pairwise(items))


def bogo_sort(arr: list[Any]) -> None:
    """Shuffle ``arr`` in place until it happens to be in ascending order."""
    while not _is_sorted(arr):
        random.shuffle(arr)