"""Stalin sort: every element that is out of order is removed."""

from __future__ import annotations

from typing import Any


def stalinsort(arr: list[Any]) -> None:
    """Remove, in place, every element smaller than the last element kept.

    The first element is always kept. Each following element is kept only if it
    is not smaller than the element kept before it. Equal elements are kept.
    """
    kept: list[Any] = []
    for item in arr:
        if not kept or not item < kept[-1]:
            kept.append(item)
    arr[:] = kept