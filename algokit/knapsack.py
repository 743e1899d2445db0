"""The 0/1 knapsack problem by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(weights: Sequence[int], values: Sequence[int], max_weight: int) -> int:
    """Return the greatest total value of items that fit within *max_weight*.

    Each item is taken at most once. The first item counts on its own
    whenever it fits, as the base of the recurrence.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if not weights:
        raise ValueError("knapsack() requires at least one item")
    if max_weight < 0:
        raise ValueError("max_weight must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    first_weight, first_value = weights[0], values[0]
    best = [first_value if capacity >= first_weight else 0 for capacity in range(max_weight + 1)]

    for weight, value in zip(weights[1:], values[1:]):
        for capacity in range(max_weight, weight - 1, -1):
            best[capacity] = max(best[capacity], best[capacity - weight] + value)
    return best[max_weight]