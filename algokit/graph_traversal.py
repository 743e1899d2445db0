"""Breadth-first and depth-first traversal of adjacency-list graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _check(adjacency: Sequence[Iterable[int]]) -> None:
    if not adjacency:
        raise ValueError("the graph must have at least one vertex")


def bfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return the vertices reachable from vertex 0 in breadth-first order."""
    _check(adjacency)
    visited = {0}
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return the vertices reachable from vertex 0 in depth-first order.

    Neighbours are explored in the order they are listed.
    """
    _check(adjacency)
    visited = {0}
    order = [0]
    stack: list[Iterator[int]] = [iter(adjacency[0])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order