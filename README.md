# atrocious_sort

A collection of some of the most useless sorting algorithms ever devised.
Every algorithm sorts in ascending order only. Each one changes the sequence it
is given in place and returns `None`.

## Installation

```
pip install atrocious_sort
```

## Algorithms

| Function | Module | What it does |
| --- | --- | --- |
| `stalinsort(arr)` | `atrocious_sort.stalinsort` | Removes every element that is smaller than the element kept before it. The first element is always kept, and equal elements are kept. |
| `intelligent_design_sort(arr)` | `atrocious_sort.intelligent_design_sort` | Leaves the sequence untouched because its order is already the intended one. It raises `TypeError` if `arr` is not a mutable sequence. |
| `sleep_sort(arr)` | `atrocious_sort.sleep_sort` | Starts one thread per element. Each thread sleeps that many seconds and then records its element. The list is rearranged in the order the threads woke up. |
| `slowsort(arr)` | `atrocious_sort.slowsort` | A multiply-and-surrender recursive sort. It works on any mutable sequence. |
| `bogo_sort(arr)` | `atrocious_sort.bogo_sort` | Shuffles the list until it happens to be sorted. |
| `bogobogo_sort(arr)` | `atrocious_sort.bogobogo_sort` | Shuffles prefixes of length 2, 3, 4 and so on, once each. As soon as a shuffled prefix is not sorted, it starts over at length 2. |
| `stoogesort(arr)` | `atrocious_sort.stoogesort` | Swaps the first and last elements if they are out of order. It then sorts the first two thirds, then the last two thirds, then the first two thirds again. It works on any mutable sequence. |

## Example

```python
from atrocious_sort.stalinsort import stalinsort
from atrocious_sort.slowsort import slowsort

data = [1, 2, 3, 2, 1]
stalinsort(data)
assert data == [1, 2, 3]

data = [5, 4, 3, 2, 1]
slowsort(data)
assert data == [1, 2, 3, 4, 5]
```

## Notes

`sleep_sort` really does sleep. A list containing `5` takes about five
seconds.

- It accepts only integers. Anything that is not an integer raises
  `TypeError`, and a negative value raises `ValueError`.
- Because of scheduling delays, values that are close together may not come
  out in order. In case of doubt, run it again.

`bogo_sort` and `bogobogo_sort` use the `random` module and have unbounded
running time. Keep the input very short.

The package is a library only. It has no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```