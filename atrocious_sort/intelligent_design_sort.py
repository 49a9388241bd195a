"""Intelligent design sort: the data is already in the order it was meant to have."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def intelligent_design_sort(arr: MutableSequence[Any]) -> None:
    """Leave ``arr`` exactly as it is; its order is already the intended one.

    The elements are neither visited nor moved. Only a mutable sequence can be
    "sorted" in place, so anything else raises :class:`TypeError`.
    """
    if not isinstance(arr, MutableSequence):
        raise TypeError(
            f"intelligent_design_sort expects a mutable sequence, "
            f"not {type(arr).__name__}"
        )
    # The elements are already exactly where they should be.
    return None