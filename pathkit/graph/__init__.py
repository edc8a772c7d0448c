"""
Graph module.

Provides the graph capability contract and its adapters:
- Graph / Directed / Coster / HeuristicCoster: Capability protocols
- DirectedGraph / UndirectedGraph: In-memory graphs
- SpatialDirectedGraph / SpatialUndirectedGraph: Graphs with a Euclidean heuristic
- setup_funcs: Builds a SearchFuncs bundle once per search
"""

from pathkit.graph.adapter import SearchFuncs, setup_funcs
from pathkit.graph.base import Coster, Directed, Edge, Graph, HeuristicCoster, Node
from pathkit.graph.concrete import (
    DirectedGraph,
    SpatialDirectedGraph,
    SpatialUndirectedGraph,
    UndirectedGraph,
)

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Directed",
    "Coster",
    "HeuristicCoster",
    "DirectedGraph",
    "UndirectedGraph",
    "SpatialDirectedGraph",
    "SpatialUndirectedGraph",
    "SearchFuncs",
    "setup_funcs",
]
