"""Dense directed graph backed by a NumPy weight matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import GraphFormatError, InputError

Vertex = int
Weight = int
Edge = Tuple[Vertex, Vertex, Weight]

# Distance of an unreached node. Large but finite so that INFINITY + weight
# stays representable; edge weights must stay below it.
INFINITY: int = (2**31 - 1) // 2


@dataclass(eq=False)
class Graph:
    """Directed graph with strictly positive integer edge weights.

    Node ids are 1-based; row and column 0 of the matrix exist but are not
    used by the tile floor. A weight of 0 means "no edge", so stored
    weights are always positive.

    Attributes:
        capacity: Largest node id the matrix can hold. The edge-list format
            derives it from the declared edge count.
        node_count: Highest node id seen by :meth:`set_edge`, ``-1`` while
            the graph has no edges.
        weights: ``(capacity + 1) x (capacity + 1)`` matrix, ``weights[u, v]``
            being the weight of ``u -> v``.
    """

    capacity: int

    def __post_init__(self) -> None:
        """Validate the capacity and allocate an empty matrix."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, (int, np.integer)):
            raise InputError("Graph.capacity must be an integer.")
        if self.capacity < 0:
            raise InputError("Graph.capacity must be non-negative.")
        self.capacity = int(self.capacity)
        self.node_count: int = -1
        self.weights: npt.NDArray[np.int64] = np.zeros(
            (self.capacity + 1, self.capacity + 1), dtype=np.int64
        )

    def set_edge(self, u: Vertex, v: Vertex, weight: Weight) -> None:
        """Store the directed edge ``u -> v``, replacing any previous weight.

        Args:
            u: Tail node id.
            v: Head node id.
            weight: Strictly positive integer weight.

        Raises:
            InputError: If the graph is frozen, or ``u`` or ``v`` lie outside
                ``[0, capacity]``.
            GraphFormatError: If ``weight`` is not an integer in
                ``[1, INFINITY)``.

        Examples:
            ```python
            >>> g = Graph(3)
            >>> g.set_edge(1, 2, 4)
            >>> int(g.weights[1, 2]), g.node_count
            (4, 2)
            ```
        """
        if self.frozen:
            raise InputError("cannot add edges to a frozen graph.")
        if not (0 <= u <= self.capacity and 0 <= v <= self.capacity):
            raise InputError(
                f"edge ({u}, {v}) uses a node id outside [0, {self.capacity}]"
            )
        if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
            raise GraphFormatError(f"non-integer weight {weight!r} on edge ({u}, {v})")
        if weight <= 0:
            raise GraphFormatError(f"non-positive weight {weight} on edge ({u}, {v})")
        if weight >= INFINITY:
            raise GraphFormatError(
                f"weight {weight} on edge ({u}, {v}) must be below {INFINITY}"
            )
        self.weights[u, v] = weight
        self.node_count = max(self.node_count, int(u), int(v))

    @classmethod
    def from_edges(cls, capacity: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph of the given capacity holding ``edges``."""
        g = cls(capacity)
        for u, v, w in edges:
            g.set_edge(int(u), int(v), w)
        return g

    def edges(self) -> Iterator[Edge]:
        """Yield stored edges ``(u, v, w)`` ordered by ``u`` then ``v``."""
        for u, v in zip(*np.nonzero(self.weights)):
            yield int(u), int(v), int(self.weights[u, v])

    @property
    def edge_count(self) -> int:
        """Number of stored edges."""
        return int(np.count_nonzero(self.weights))

    @property
    def frozen(self) -> bool:
        return not self.weights.flags.writeable

    def freeze(self) -> "Graph":
        """Make the weight matrix read-only and return ``self``.

        Any later :meth:`set_edge` raises :class:`InputError`.
        """
        self.weights.flags.writeable = False
        return self


__all__ = ["INFINITY", "Graph", "Vertex", "Weight", "Edge"]
