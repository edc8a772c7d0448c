"""
Vector-backed heuristics for graphs whose nodes carry coordinates or embeddings.

EuclideanHeuristic: Straight-line distance between node positions
CosineHeuristic: Scaled cosine distance between node embeddings

Nodes without a vector score 0.0, which keeps the estimate admissible
instead of failing the search.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import numpy as np

from pathkit.config import NULL_HEURISTIC_COST

if TYPE_CHECKING:
    from pathkit.graph.base import Node

logger = logging.getLogger(__name__)


class VectorHeuristic:
    """
    Base class holding one float vector per node.

    Subclasses implement _distance(); calling the instance with
    (a, b) returns the scaled estimate, so it can be passed anywhere a
    heuristic function is expected.
    """

    def __init__(
        self,
        vectors: Mapping[Node, Sequence[float]],
        scale: float = 1.0,
    ) -> None:
        """
        Initialize from a node -> vector mapping.

        Args:
            vectors: Coordinates or embeddings keyed by node
            scale: Multiplier applied to every estimate

        Raises:
            ValueError: If vectors disagree on dimension or scale is negative
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        self._scale = float(scale)
        self._dim: int | None = None
        self._vectors: dict[Node, np.ndarray] = {}
        for node, vector in vectors.items():
            self.set_vector(node, vector)

    def set_vector(self, node: Node, vector: Sequence[float]) -> None:
        """Attach (or replace) the vector for a node."""
        arr = np.asarray(vector, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"Vector for {node!r} must be 1-D, got shape {arr.shape}")
        arr = self._prepare(arr)
        if self._dim is None:
            self._dim = arr.shape[0]
        elif arr.shape[0] != self._dim:
            raise ValueError(
                f"Vector for {node!r} has dimension {arr.shape[0]}, expected {self._dim}"
            )
        self._vectors[node] = arr

    def vector(self, node: Node) -> np.ndarray | None:
        """Stored vector for a node, or None if it has none."""
        return self._vectors.get(node)

    @property
    def dim(self) -> int | None:
        return self._dim

    def _prepare(self, vector: np.ndarray) -> np.ndarray:
        return vector

    def _distance(self, a: np.ndarray, b: np.ndarray) -> float:
        raise NotImplementedError

    def __call__(self, a: Node, b: Node) -> float:
        vec_a = self._vectors.get(a)
        vec_b = self._vectors.get(b)
        if vec_a is None or vec_b is None:
            logger.debug(f"No vector for {a!r} or {b!r}, estimating 0")
            return NULL_HEURISTIC_COST
        return self._scale * self._distance(vec_a, vec_b)

    def __len__(self) -> int:
        return len(self._vectors)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self)}, dim={self._dim}, scale={self._scale})"


class EuclideanHeuristic(VectorHeuristic):
    """
    Straight-line distance between node positions.

    Admissible whenever every edge weight is at least the Euclidean
    length between its endpoints (scale <= 1 for such layouts).
    """

    def _distance(self, a: np.ndarray, b: np.ndarray) -> float:
        return float(np.linalg.norm(a - b))


class CosineHeuristic(VectorHeuristic):
    """
    Cosine distance between node embeddings: scale * (1 - cos_sim).

    Vectors are L2-normalized on insertion so each estimate is a single
    dot product. Zero vectors stay zero and estimate 1.0 against
    anything else.
    """

    def _prepare(self, vector: np.ndarray) -> np.ndarray:
        norm = np.linalg.norm(vector)
        if norm > 0:
            vector = vector / norm
        return vector

    def _distance(self, a: np.ndarray, b: np.ndarray) -> float:
        similarity = float(np.dot(a, b))
        # Rounding can push normalized dot products slightly past [-1, 1]
        return max(0.0, 1.0 - min(1.0, similarity))
