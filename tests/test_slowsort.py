import pytest

from atrocious_sort.slowsort import slowsort


def _slowly(values):
    patient = list(values)
    slowsort(patient)
    return patient


@pytest.mark.parametrize(
    "unhurried, settled",
    [
        pytest.param([5, 4, 3, 2, 1], [1, 2, 3, 4, 5], id="slow-descending"),
        pytest.param([], [], id="slow-empty"),
        pytest.param([1, 2, 3, 4, 5], [1, 2, 3, 4, 5], id="slow-ascending"),
        pytest.param([1, 2, 3, 2, 1], [1, 1, 2, 2, 3], id="slow-peak"),
        pytest.param([42], [42], id="slow-single"),
        pytest.param(
            ["pear", "apple", "fig", "banana"],
            ["apple", "banana", "fig", "pear"],
            id="slow-strings",
        ),
    ],
)
def test_slowsort_orders(unhurried, settled):
    assert _slowly(unhurried) == settled


def test_slowsort_in_place_on_mixed_values():
    coffee_break = [7, -3, 0, 12, 7, 5, -8, 1, 1, 9]
    assert slowsort(coffee_break) is None
    assert coffee_break == [-8, -3, 0, 1, 1, 5, 7, 7, 9, 12]