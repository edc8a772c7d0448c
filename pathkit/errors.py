"""
Exceptions raised when callers break the search contract.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for pathkit contract violations."""


class EmptyQueueError(SearchError, IndexError):
    """Raised when popping from an empty priority queue."""

    def __init__(self) -> None:
        super().__init__("pop from empty priority queue")


class NodeNotFoundError(SearchError, KeyError):
    """Raised when a search is started from or aimed at a node the graph lacks."""

    def __init__(self, node: object) -> None:
        super().__init__(f"Node {node!r} not in graph")
        self.node = node


class NegativeWeightError(SearchError, ValueError):
    """Raised when a cost-ordered search meets a negative edge cost."""

    def __init__(self, source: object, target: object, weight: float) -> None:
        super().__init__(
            f"Negative edge cost {weight} on {source!r} -> {target!r}"
        )
        self.source = source
        self.target = target
        self.weight = weight
