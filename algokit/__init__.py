"""Classic algorithms: sorting, binary search, graph traversal, knapsack and permutations."""

__version__ = "0.1.0"

__all__ = ["backtracking", "binary_search", "graph_traversal", "knapsack", "sorting"]