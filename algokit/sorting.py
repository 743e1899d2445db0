"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining item to the front."""
    data = list(items)
    for start in range(len(data) - 1):
        smallest = min(range(start, len(data)), key=data.__getitem__)
        data[start], data[smallest] = data[smallest], data[start]
    return data


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    data = list(items)
    for index in range(1, len(data)):
        key = data[index]
        position = index - 1
        while position >= 0 and data[position] > key:
            data[position + 1] = data[position]
            position -= 1
        data[position + 1] = key
    return data


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by swapping adjacent items that are out of order."""
    data = list(items)
    size = len(data)
    for done in range(size - 1):
        for index in range(size - done - 1):
            if data[index] > data[index + 1]:
                data[index], data[index + 1] = data[index + 1], data[index]
    return data


def _sift_down(heap: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    data = list(items)
    size = len(data)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(data, size, root)
    for end in range(size - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging the results."""
    data = list(items)
    if len(data) <= 1:
        return data
    middle = (len(data) + 1) // 2
    return _merge(merge_sort(data[:middle]), merge_sort(data[middle:]))


def _partition(data: list[T], low: int, high: int) -> int:
    pivot = data[high]
    boundary = low
    for index in range(low, high + 1):
        if data[index] < pivot:
            data[boundary], data[index] = data[index], data[boundary]
            boundary += 1
    data[boundary], data[high] = data[high], data[boundary]
    return boundary


def _quick_sort(data: list[T], low: int, high: int) -> None:
    # Recurse into the smaller side only, so depth stays logarithmic.
    while low < high:
        pivot = _partition(data, low, high)
        if pivot - low < high - pivot:
            _quick_sort(data, low, pivot - 1)
            low = pivot + 1
        else:
            _quick_sort(data, pivot + 1, high)
            high = pivot - 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Sort by partitioning around the last item and sorting each side."""
    data = list(items)
    _quick_sort(data, 0, len(data) - 1)
    return data