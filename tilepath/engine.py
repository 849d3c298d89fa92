"""Single-source shortest paths with the dense O(V^2) Dijkstra algorithm."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError, EmptyGraphError, InputError, InvalidSourceError
from .graph import INFINITY, Graph, Vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_path

_SELECTIONS = ("scan", "heap")
# Larger than any distance; hides visited nodes from the minimum scan.
_MASKED = np.iinfo(np.int64).max


@dataclass(frozen=True)
class EngineConfig:
    """Configuration knobs for :class:`ShortestPathEngine`.

    Attributes:
        selection: ``"scan"`` picks the next node with a linear scan over all
            node ids (the reference behaviour). ``"heap"`` uses a binary heap
            and skips nodes that cannot be reached.
        track_predecessors: Record the predecessor of every improved node so
            that paths can be rebuilt.
    """

    selection: str = "scan"
    track_predecessors: bool = True

    def __post_init__(self) -> None:
        if self.selection not in _SELECTIONS:
            raise ConfigError(
                f"selection must be one of {', '.join(_SELECTIONS)}; got {self.selection!r}"
            )


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances and predecessors produced by one engine run.

    Both lists are indexed by node id and have ``graph.capacity + 1``
    entries. Index 0 is unused.
    """

    source: Vertex
    distances: List[int]
    predecessors: List[Optional[Vertex]]

    def reachable(self, node: Vertex) -> bool:
        return self.distances[node] < INFINITY


@dataclass(frozen=True)
class EngineMetrics:
    """Counters and timing collected from an engine run."""

    node_count: int
    edge_count: int
    selection: str
    counters: Dict[str, int]
    wall_ms: float


def check_source(graph: Graph, source: Vertex) -> None:
    """Validate ``source`` against ``graph``.

    Raises:
        EmptyGraphError: If the graph holds no edges yet.
        InvalidSourceError: If ``source`` is not in ``[1, graph.node_count]``.
    """
    if graph.node_count < 1:
        raise EmptyGraphError("graph has no nodes; load at least one edge first.")
    if not (1 <= source <= graph.node_count):
        raise InvalidSourceError(source, graph.node_count)


class ShortestPathEngine:
    """Dijkstra's algorithm over the dense weight matrix of a :class:`Graph`.

    The engine reads ``graph.weights`` and never writes to it, so one frozen
    graph can serve several engines. An engine keeps the result of its last
    :meth:`solve` for :meth:`path` and the counters, and is not meant to be
    shared between threads.
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[EngineConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.graph = graph
        self.cfg = config or EngineConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {}
        self._reset_counters()
        self._result: Optional[ShortestPathResult] = None

    def _reset_counters(self) -> None:
        self.counters = {
            "selections": 0,
            "edges_scanned": 0,
            "edges_relaxed": 0,
            "unreachable_selections": 0,
        }

    # ---------- public API ------------------------------------------------

    def solve(self, source: Vertex) -> ShortestPathResult:
        """Compute shortest distances from ``source`` to every node.

        Args:
            source: Node id in ``[1, graph.node_count]``.

        Returns:
            The distances (``INFINITY`` for unreachable nodes) and predecessors.

        Raises:
            EmptyGraphError: If the graph has no nodes.
            InvalidSourceError: If ``source`` is out of range.
        """
        check_source(self.graph, source)
        self._reset_counters()
        n = self.graph.node_count
        self.logger.debug(
            "dijkstra_start", source=source, node_count=n, selection=self.cfg.selection
        )

        dist = np.full(self.graph.capacity + 1, INFINITY, dtype=np.int64)
        pred = np.full(self.graph.capacity + 1, -1, dtype=np.int64)
        dist[source] = 0
        if self.cfg.selection == "heap":
            self._run_heap(source, dist, pred)
        else:
            self._run_scan(dist, pred)

        distances = [int(d) for d in dist]
        if self.cfg.track_predecessors:
            predecessors: List[Optional[Vertex]] = [int(p) if p >= 0 else None for p in pred]
        else:
            predecessors = [None] * len(distances)
        result = ShortestPathResult(source=source, distances=distances, predecessors=predecessors)
        self._result = result
        self.logger.debug(
            "dijkstra_done",
            source=source,
            reached=sum(1 for d in distances[1 : n + 1] if d < INFINITY),
            **self.counters,
        )
        return result

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the node ids from the last solved source to ``target``.

        Returns an empty list when ``target`` is unreachable.

        Raises:
            InputError: If :meth:`solve` has not been called, predecessors
                were not tracked, or ``target`` is out of range.
        """
        if self._result is None:
            raise InputError("call solve() before asking for a path.")
        if not self.cfg.track_predecessors:
            raise InputError("predecessor tracking is disabled in the engine config.")
        return reconstruct_path(self._result.predecessors, self._result.source, target)

    def summary(self) -> Dict[str, int]:
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> EngineMetrics:
        return EngineMetrics(
            node_count=self.graph.node_count,
            edge_count=self.graph.edge_count,
            selection=self.cfg.selection,
            counters=self.summary(),
            wall_ms=wall_ms,
        )

    # ---------- selection strategies --------------------------------------

    def _run_scan(self, dist: npt.NDArray[np.int64], pred: npt.NDArray[np.int64]) -> None:
        """Run exactly ``node_count`` rounds of scan, visit and relax.

        ``np.argmin`` returns the first minimum, so ties go to the lowest id.
        Once only unreachable nodes remain, the lowest unvisited id is picked
        and relaxing from it changes nothing.
        """
        n = self.graph.node_count
        weights = self.graph.weights
        visited = np.zeros(n + 1, dtype=bool)
        window = dist[1 : n + 1]
        pred_window = pred[1 : n + 1]

        for _ in range(n):
            mini = int(np.argmin(np.where(visited[1:], _MASKED, window))) + 1
            visited[mini] = True
            self.counters["selections"] += 1
            if dist[mini] >= INFINITY:
                self.counters["unreachable_selections"] += 1
                self.logger.debug("unreachable_selection", node=mini)

            row = weights[mini, 1 : n + 1]
            has_edge = row > 0
            candidate = dist[mini] + row
            better = has_edge & (candidate < window)
            window[better] = candidate[better]
            pred_window[better] = mini
            self.counters["edges_scanned"] += int(np.count_nonzero(has_edge))
            self.counters["edges_relaxed"] += int(np.count_nonzero(better))

    def _run_heap(
        self, source: Vertex, dist: npt.NDArray[np.int64], pred: npt.NDArray[np.int64]
    ) -> None:
        """Lazy-deletion binary heap variant; same distances for positive weights."""
        n = self.graph.node_count
        weights = self.graph.weights
        visited = np.zeros(n + 1, dtype=bool)
        heap: List[Tuple[int, Vertex]] = [(0, source)]

        while heap:
            d, u = heapq.heappop(heap)
            if visited[u] or d != dist[u]:
                continue
            visited[u] = True
            self.counters["selections"] += 1

            for v in np.flatnonzero(weights[u, 1 : n + 1]) + 1:
                self.counters["edges_scanned"] += 1
                if visited[v]:
                    continue
                nd = d + int(weights[u, v])
                if nd < dist[v]:
                    dist[v] = nd
                    pred[v] = u
                    self.counters["edges_relaxed"] += 1
                    heapq.heappush(heap, (nd, int(v)))


def dijkstra(source: Vertex, graph: Graph, logger: Logger | None = None) -> List[int]:
    """Return the shortest distance from ``source`` to every node id of ``graph``.

    The list has ``graph.capacity + 1`` entries; index 0 is unused and
    unreachable nodes hold :data:`INFINITY`.

    Every edge weight is below :data:`INFINITY`, but path totals are not
    bounded by the graph. A node whose shortest path sums to ``INFINITY`` or
    more is reported as ``INFINITY``, the same as an unreachable node.

    Raises:
        EmptyGraphError: If the graph has no nodes.
        InvalidSourceError: If ``source`` is not in ``[1, graph.node_count]``.

    Examples:
        ```python
        >>> g = Graph.from_edges(5, [(1, 2, 10)])
        >>> dijkstra(1, g)[:3]
        [1073741823, 0, 10]
        ```
    """
    engine = ShortestPathEngine(graph, EngineConfig(track_predecessors=False), logger=logger)
    return engine.solve(source).distances


__all__ = [
    "INFINITY",
    "EngineConfig",
    "EngineMetrics",
    "ShortestPathEngine",
    "ShortestPathResult",
    "check_source",
    "dijkstra",
]
