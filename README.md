# algokit

A small collection of classic algorithms, written as plain Python functions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `algokit.sorting`

Each function takes any iterable and returns a new sorted list in ascending order. The input is left unchanged.

- `selection_sort(items)`
- `insertion_sort(items)`
- `bubble_sort(items)`
- `heap_sort(items)`
- `merge_sort(items)`
- `quick_sort(items)`: partitions around the last item of each range

```python
from algokit.sorting import merge_sort

merge_sort([4, 2, 6, 2, 5, 1, 56, 23, -89, 0])
# [-89, 0, 1, 2, 2, 4, 5, 6, 23, 56]
```

### `algokit.binary_search`

- `find_min(nums)` returns the smallest value in a rotated ascending sequence of distinct values.
- `find_peak_element(nums)` returns the index of an element greater than its neighbours; positions outside the sequence count as lower than any element.
- `lower_bound(nums, target)` returns the first index of a sorted sequence whose value is not below `target`.
- `search_range(nums, target)` returns the tuple `(first, last)` of the first and last indices of `target` in a sorted sequence, or `(-1, -1)` if it is absent.
- `min_eating_speed(piles, h)` returns the slowest whole eating speed that finishes all piles within `h` hours.
- `min_days(bloom_days, m, k)` returns the first day on which `m` bouquets of `k` adjacent flowers can be made, or `-1` if that never becomes possible.
- `ship_within_days(weights, days)` returns the least ship capacity that carries all packages, in order, within `days` days.
- `smallest_divisor(nums, threshold)` returns the smallest divisor whose rounded-up quotients sum to at most `threshold`. Divisors are searched up to one million; if none up to that limit works, the result is 1,000,001.

`find_min`, `find_peak_element`, `min_eating_speed`, `min_days` and `ship_within_days` raise `ValueError` when given an empty sequence.

```python
from algokit.binary_search import search_range, min_eating_speed

search_range([5, 7, 7, 8, 8, 10], 8)  # (3, 4)
min_eating_speed([3, 6, 7, 11], 8)    # 4
```

### `algokit.graph_traversal`

`bfs(adjacency)` and `dfs(adjacency)` traverse a graph given as a sequence of adjacency lists, one iterable of neighbour indices per vertex. Both start from vertex 0 and return the reachable vertices in the order they are visited; neighbours are taken in the order they are listed. An empty graph raises `ValueError`.

```python
from algokit.graph_traversal import bfs, dfs

graph = [[1, 2], [3], [3], []]
bfs(graph)  # [0, 1, 2, 3]
dfs(graph)  # [0, 1, 3, 2]
```

### `algokit.knapsack`

`knapsack(weights, values, max_weight)` solves the 0/1 knapsack problem: each item is taken at most once, and the result is the greatest total value that fits within `max_weight`. It raises `ValueError` when `weights` and `values` differ in length, when there are no items, or when `max_weight` or any weight is negative.

```python
from algokit.knapsack import knapsack

knapsack([1, 2, 4, 5], [5, 4, 8, 6], 5)  # 13
```

### `algokit.backtracking`

`permute(nums)` returns every ordering of `nums` as a list of lists, generated by backtracking. Positions are treated as distinct, so repeated values give repeated orderings. For input in ascending order the orderings come out in lexicographic order.

```python
from algokit.backtracking import permute

permute([1, 2, 3])
# [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]
```

## What it does not do

algokit is a library only: it has no command-line program. The functions work on in-memory sequences and return plain Python values; nothing is read from or written to files.