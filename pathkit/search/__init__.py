"""
Search module.

Provides the pieces a search loop is assembled from, and the loops themselves:
- AStarPriorityQueue / InternalNode: Relaxable open set
- rebuild_path: Path reconstruction from a predecessor map
- sort_edges / sort_nodes: Deterministic tie-break orderings
- a_star, dijkstra, uniform_cost_search, breadth_first_search: Single-pair searches
- dijkstra_from, minimum_spanning_tree: Whole-graph algorithms
- SearchResult / ShortestPaths: Result records
"""

from pathkit.search.algorithms import (
    a_star,
    breadth_first_search,
    dijkstra,
    dijkstra_from,
    is_path,
    minimum_spanning_tree,
    path_cost,
    uniform_cost_search,
)
from pathkit.search.ordering import (
    compare_edges,
    compare_nodes,
    edge_sort_key,
    node_sort_key,
    sort_edges,
    sort_nodes,
)
from pathkit.search.path import rebuild_path
from pathkit.search.queue import AStarPriorityQueue, InternalNode
from pathkit.search.state import SearchResult, ShortestPaths

__all__ = [
    "AStarPriorityQueue",
    "InternalNode",
    "rebuild_path",
    "edge_sort_key",
    "node_sort_key",
    "compare_edges",
    "compare_nodes",
    "sort_edges",
    "sort_nodes",
    "a_star",
    "dijkstra",
    "uniform_cost_search",
    "breadth_first_search",
    "dijkstra_from",
    "minimum_spanning_tree",
    "is_path",
    "path_cost",
    "SearchResult",
    "ShortestPaths",
    "get_algorithm",
]


def get_algorithm(name: str):
    """
    Get a single-pair search function by name.

    Args:
        name: Algorithm identifier (a_star, dijkstra, uniform_cost, bfs)

    Returns:
        Callable taking (graph, start, goal) and returning a SearchResult

    Raises:
        ValueError: If algorithm name is unknown
    """
    algorithms = {
        "a_star": a_star,
        "dijkstra": dijkstra,
        "uniform_cost": uniform_cost_search,
        "bfs": breadth_first_search,
    }

    if name not in algorithms:
        available = ", ".join(algorithms.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return algorithms[name]
