"""Sleep sort: each element waits as many seconds as its value before it is placed."""

from __future__ import annotations

import operator
import threading
from time import sleep
from typing import Any


def _sleep_amount(item: Any) -> int:
    seconds = operator.index(item)
    if seconds < 0:
        raise ValueError(f"cannot sleep for a negative amount: {seconds}")
    return seconds


def sleep_sort(arr: list[Any]) -> None:
    """Reorder ``arr`` in place by the order in which one thread per item wakes up.

    Each item must be a non-negative integer; its thread sleeps that many
    seconds before recording it. The result depends on thread scheduling and is
    therefore not guaranteed to be sorted for values close together.
    """
    amounts = [_sleep_amount(item) for item in arr]
    woken: list[Any] = []
    lock = threading.Lock()

    def wake_after(item: Any, seconds: int) -> None:
        sleep(seconds)
        with lock:
            woken.append(item)

    threads = [
        threading.Thread(target=wake_after, args=(item, seconds))
        for item, seconds in zip(arr, amounts)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if len(woken) != len(arr):
        raise RuntimeError("not every element woke up")
    arr[:] = woken