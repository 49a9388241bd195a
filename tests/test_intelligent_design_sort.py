import pytest

from atrocious_sort.intelligent_design_sort import intelligent_design_sort


@pytest.mark.parametrize(
    "creation",
    [
        pytest.param([5, 4, 3, 2, 1], id="design-descending"),
        pytest.param([], id="design-empty"),
        pytest.param([1, 2, 3, 4, 5], id="design-ascending"),
        pytest.param([1, 2, 3, 2, 1], id="design-peak"),
        pytest.param([object, None, 3, "x"], id="design-unorderable"),
    ],
)
def test_intelligent_design_keeps_the_order(creation):
    blessed = list(creation)
    assert intelligent_design_sort(creation) is None
    assert creation == blessed