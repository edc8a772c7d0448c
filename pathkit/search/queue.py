"""
Relaxable min-priority queue for A*-style best-first search.

The heap list holds InternalNode records and a dict maps each node to its
current slot in that list. Every swap updates both, which is what lets
relax() find a node in O(1) and re-heapify it in O(log n) instead of
scanning the heap.

Usage:
    queue = AStarPriorityQueue()
    queue.push("A", gscore=0.0, fscore=4.0)
    queue.push("B", gscore=1.0, fscore=3.0)
    queue.relax("A", gscore=0.0, fscore=2.0)
    queue.pop().node  # "A"
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace

from pathkit.errors import EmptyQueueError
from pathkit.graph.base import Node

logger = logging.getLogger(__name__)


@dataclass
class InternalNode:
    """
    A node paired with its search scores.

    Attributes:
        node: The caller's node identifier
        gscore: Best known path cost from the start
        fscore: gscore plus the heuristic estimate to the goal
    """

    node: Node
    gscore: float
    fscore: float


class AStarPriorityQueue:
    """
    Min-heap over InternalNode ordered by fscore.

    Equal fscores are ordered by node identifier, so pop order is
    reproducible across runs. Each node appears at most once.
    """

    def __init__(self) -> None:
        self._nodes: list[InternalNode] = []
        self._index: dict[Node, int] = {}

    # =========================================================================
    # Heap Internals
    # =========================================================================

    def _less(self, i: int, j: int) -> bool:
        a = self._nodes[i]
        b = self._nodes[j]
        if a.fscore != b.fscore:
            return a.fscore < b.fscore
        return a.node < b.node

    def _swap(self, i: int, j: int) -> None:
        nodes = self._nodes
        self._index[nodes[i].node] = j
        self._index[nodes[j].node] = i
        nodes[i], nodes[j] = nodes[j], nodes[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> bool:
        """Push slot i toward the leaves. Returns True if it moved."""
        start = i
        n = len(self._nodes)
        while True:
            smallest = i
            left = 2 * i + 1
            right = left + 1
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest
        return i != start

    def _fix(self, i: int) -> None:
        if not self._sift_down(i):
            self._sift_up(i)

    # =========================================================================
    # Queue Operations
    # =========================================================================

    def push(self, node: Node, gscore: float, fscore: float) -> bool:
        """
        Add a node to the open set.

        Returns:
            True if added, False if the node was already queued
            (use relax() to change its scores)
        """
        if node in self._index:
            return False
        self._nodes.append(InternalNode(node, gscore, fscore))
        self._index[node] = len(self._nodes) - 1
        self._sift_up(len(self._nodes) - 1)
        return True

    def pop(self) -> InternalNode:
        """
        Remove and return the node with the smallest fscore.

        Raises:
            EmptyQueueError: If the queue is empty. Check len() first.
        """
        if not self._nodes:
            raise EmptyQueueError()
        last = len(self._nodes) - 1
        self._swap(0, last)
        item = self._nodes.pop()
        del self._index[item.node]
        if self._nodes:
            self._sift_down(0)
        return item

    def peek(self) -> InternalNode:
        """Smallest-fscore node without removing it.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._nodes:
            raise EmptyQueueError()
        return replace(self._nodes[0])

    def exists(self, node: Node) -> bool:
        """Whether node is currently queued."""
        return node in self._index

    def find(self, node: Node) -> tuple[InternalNode | None, bool]:
        """
        Look up a queued node's scores without removing it.

        Returns:
            (copy of the InternalNode, True) if queued, else (None, False)
        """
        i = self._index.get(node)
        if i is None:
            return None, False
        return replace(self._nodes[i]), True

    def relax(self, node: Node, gscore: float, fscore: float) -> bool:
        """
        Overwrite a queued node's scores and restore heap order.

        Absent nodes are left alone: callers push before relaxing.

        Returns:
            True if the node was queued and updated, False otherwise
        """
        i = self._index.get(node)
        if i is None:
            logger.debug(f"relax() on unqueued node {node!r} ignored")
            return False
        item = self._nodes[i]
        item.gscore = gscore
        item.fscore = fscore
        self._fix(i)
        return True

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Check the heap order and the node -> slot index."""
        n = len(self._nodes)
        return {
            "sizes_match": n == len(self._index),
            "index_matches_slots": all(
                self._index.get(item.node) == i for i, item in enumerate(self._nodes)
            ),
            "heap_ordered": all(
                not self._less(i, (i - 1) // 2) for i in range(1, n)
            ),
        }

    def __contains__(self, node: Node) -> bool:
        return node in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[InternalNode]:
        """Queued nodes in heap (not sorted) order."""
        return (replace(item) for item in self._nodes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
