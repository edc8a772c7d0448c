"""
Heuristics module.

Provides the cost and heuristic functions used to score a search:
- uniform_cost: Default edge cost (1 per edge, infinity when absent)
- null_heuristic: Default estimate of 0 (A* becomes Dijkstra)
- EuclideanHeuristic: Straight-line distance between node positions
- CosineHeuristic: Cosine distance between node embeddings
"""

from pathkit.heuristics.cost import null_heuristic, uniform_cost
from pathkit.heuristics.spatial import CosineHeuristic, EuclideanHeuristic, VectorHeuristic

__all__ = [
    "uniform_cost",
    "null_heuristic",
    "VectorHeuristic",
    "EuclideanHeuristic",
    "CosineHeuristic",
]
