"""
Path reconstruction from a predecessor map.
"""

from __future__ import annotations

from collections.abc import Mapping

from pathkit.graph.base import Node
from pathkit.search.queue import InternalNode


def _unwrap(node: Node | InternalNode) -> Node:
    if isinstance(node, InternalNode):
        return node.node
    return node


def rebuild_path(predecessors: Mapping[Node, Node | InternalNode], goal: Node | InternalNode) -> list[Node]:
    """
    Rebuild the start -> goal path by walking predecessors back from goal.

    The walk stops at the first node with no predecessor entry (the start).
    An entry of None counts as no entry, so BFS-style parent maps that
    record {start: None} work too. A goal with no entry yields [goal].
    InternalNode wrappers in the map or the goal are unwrapped to the
    caller's nodes.

    The map must be acyclic; a cycle makes this loop forever.
    """
    curr = _unwrap(goal)
    path = [curr]
    prev = predecessors.get(curr)
    while prev is not None:
        curr = _unwrap(prev)
        path.append(curr)
        prev = predecessors.get(curr)

    path.reverse()
    return path
