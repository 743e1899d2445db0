"""Binary-search solutions to classic search and minimisation problems."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Sequence
from itertools import pairwise

_MAX_DIVISOR = 1_000_000


def _first_satisfying(low: int, high: int, predicate: Callable[[int], bool]) -> int:
    """Smallest value in [low, high] for which a monotone *predicate* holds.

    Returns ``high + 1`` when the predicate holds nowhere in the range.
    """
    while low <= high:
        mid = (low + high) // 2
        if predicate(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_min(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("find_min() requires a non-empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[high] < nums[mid]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Positions outside the sequence count as lower than any element.
    """
    if not nums:
        raise ValueError("find_peak_element() requires a non-empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid + 1]:
            high = mid
        else:
            low = mid + 1
    return low


def lower_bound(nums: Sequence[int], target: int) -> int:
    """Return the first index of a sorted sequence whose value is not below *target*."""
    return bisect.bisect_left(nums, target)


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of *target* in sorted *nums*, or (-1, -1)."""
    first = lower_bound(nums, target)
    last = lower_bound(nums, target + 1) - 1
    if first < len(nums) and nums[first] == target:
        return first, last
    return -1, -1


def _hours_to_eat(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest whole eating speed that finishes all *piles* within *h* hours."""
    if not piles:
        raise ValueError("min_eating_speed() requires at least one pile")
    return _first_satisfying(1, max(piles), lambda speed: _hours_to_eat(piles, speed) <= h)


def _bouquets_ready(bloom_days: Sequence[int], day: int, k: int) -> int:
    bouquets = 0
    run = 0
    for bloom in bloom_days:
        if bloom <= day:
            run += 1
            if run == k:
                bouquets += 1
                run = 0
        else:
            run = 0
    return bouquets


def min_days(bloom_days: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which *m* bouquets of *k* adjacent flowers can be made.

    Returns -1 when that never becomes possible.
    """
    if not bloom_days:
        raise ValueError("min_days() requires at least one flower")
    high = max(bloom_days)
    day = _first_satisfying(
        min(bloom_days), high, lambda d: _bouquets_ready(bloom_days, d, k) >= m
    )
    return day if day <= high else -1


def _days_to_ship(weights: Sequence[int], capacity: int) -> int:
    days = 1
    load = 0
    for current, following in pairwise(weights):
        load += current
        if load + following > capacity:
            days += 1
            load = 0
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries *weights*, in order, within *days*."""
    if not weights:
        raise ValueError("ship_within_days() requires at least one package")
    return _first_satisfying(
        max(weights), sum(weights), lambda capacity: _days_to_ship(weights, capacity) <= days
    )


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the smallest divisor whose rounded-up quotients sum to at most *threshold*.

    Divisors are searched up to one million; beyond that the result is
    one past that limit.
    """
    return _first_satisfying(
        1,
        _MAX_DIVISOR,
        lambda divisor: sum(-(-num // divisor) for num in nums) <= threshold,
    )