"""
Deterministic orderings for edges and nodes.

Edges sort by weight, then by (source, target) so equal weights still
compare strictly. Nodes sort by identifier. Both orderings are total,
which keeps test fixtures and tie resolution reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathkit.graph.base import Edge, Node


def edge_sort_key(edge: Edge) -> tuple:
    """Sort key: weight ascending, then source, then target."""
    return (edge.weight, edge.source, edge.target)


def node_sort_key(node: Node) -> Node:
    """Sort key: the node identifier itself."""
    return node


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_edges(a: Edge, b: Edge) -> int:
    """Three-way comparison (-1, 0, 1) under the edge ordering."""
    return _cmp(edge_sort_key(a), edge_sort_key(b))


def compare_nodes(a: Node, b: Node) -> int:
    """Three-way comparison (-1, 0, 1) under the node ordering."""
    return _cmp(node_sort_key(a), node_sort_key(b))


def sort_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Edges by weight ascending, agnostic to direction and repeats."""
    return sorted(edges, key=edge_sort_key)


def sort_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Nodes by identifier ascending."""
    return sorted(nodes, key=node_sort_key)
