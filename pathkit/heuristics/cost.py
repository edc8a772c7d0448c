"""
Default cost and heuristic functions.

These are injected into a search when neither the caller nor the graph
provides its own. Both are stateless, so every search can share them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathkit.config import ABSENT_EDGE_COST, NULL_HEURISTIC_COST, UNIFORM_EDGE_COST

if TYPE_CHECKING:
    from pathkit.graph.base import Edge, Node


def uniform_cost(edge: Edge | None) -> float:
    """Every present edge costs 1.0; an absent edge (None) costs infinity."""
    if edge is None:
        return ABSENT_EDGE_COST
    return UNIFORM_EDGE_COST


def null_heuristic(a: Node, b: Node) -> float:
    """
    Heuristic that always estimates 0.0.

    Zero never overestimates, so it is admissible: A* run with it
    expands nodes exactly like Dijkstra.
    """
    return NULL_HEURISTIC_COST
