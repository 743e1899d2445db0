"""Generation of permutations by backtracking."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def permute(nums: Iterable[T]) -> list[list[T]]:
    """Return every ordering of *nums*.

    Positions are treated as distinct, so repeated values give repeated
    orderings. Orderings come out in the order their positions are chosen:
    for input already in ascending order this is lexicographic order.
    """
    items = list(nums)
    used = [False] * len(items)
    chosen: list[T] = []
    result: list[list[T]] = []

    def extend() -> None:
        if len(chosen) == len(items):
            result.append(list(chosen))
            return
        for index, item in enumerate(items):
            if used[index]:
                continue
            used[index] = True
            chosen.append(item)
            extend()
            chosen.pop()
            used[index] = False

    extend()
    return result