"""
Core graph data structure with insertion-ordered adjacency mappings.

This module provides the WeightedGraph class: a directed graph whose edges
carry non-negative integer weights. Each vertex maps to an ordered mapping of
outgoing neighbors, so neighbor iteration follows edge insertion order and
every search over the graph is reproducible.

The graph also owns the observer registry and the three algorithm entry
points. Algorithms report their results exclusively through observer
notifications; the entry points return nothing.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Generator, Generic, Iterator, List, Optional

from .config import EngineConfig
from .events import GraphAlgorithmObserver, ObserverRegistry
from .exceptions import (
    DuplicateVertexError,
    InvalidEndpointError,
    InvalidOperationError,
    InvalidWeightError,
)
from .shortest_path import DijkstraSearch
from .traversal import BreadthFirstSearch, DepthFirstSearch
from .types import EdgeTuple, V, Weight

logger = logging.getLogger(__name__)


class WeightedGraph(Generic[V]):
    """
    Directed graph with non-negative integer edge weights.

    Vertices are opaque hashable values supplied by the caller. The graph
    never stores duplicate vertices and holds at most one edge per ordered
    pair of vertices.

    The graph is read-only while an algorithm runs: adding vertices or edges
    from inside an observer callback raises InvalidOperationError.

    Attributes:
        _adjacency (Dict[V, Dict[V, int]]): Outgoing neighbors and weights per vertex
        _edge_count (int): Number of edges in the graph
        _observers (ObserverRegistry): Registered algorithm observers
        _config (EngineConfig): Engine configuration
        _running (Optional[str]): Name of the algorithm currently running
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[EngineConfig]): Engine configuration (default settings if omitted)
        """
        self._adjacency: Dict[V, Dict[V, Weight]] = {}
        self._edge_count = 0
        self._observers: ObserverRegistry[V] = ObserverRegistry()
        self._config = config or EngineConfig()
        self._running: Optional[str] = None

    @property
    def config(self) -> EngineConfig:
        """Engine configuration used by this graph."""
        return self._config

    @property
    def observers(self) -> ObserverRegistry[V]:
        """Registry of algorithm observers."""
        return self._observers

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return self._edge_count

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer notified by every algorithm run."""
        self._observers.add_observer(observer)

    def _check_mutable(self) -> None:
        if self._running is not None:
            raise InvalidOperationError(
                f"Cannot modify the graph while {self._running} is running"
            )

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: If the vertex is already in the graph
            InvalidOperationError: If an algorithm is running
        """
        self._check_mutable()
        if vertex in self._adjacency:
            raise DuplicateVertexError(vertex)
        self._adjacency[vertex] = {}

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._adjacency

    def add_edge(self, from_vertex: V, to_vertex: V, weight: Weight) -> None:
        """
        Add a directed edge, replacing the weight of an existing one.

        Args:
            from_vertex: Vertex the edge leads from
            to_vertex: Vertex the edge leads to
            weight: Non-negative integer cost of the edge

        Raises:
            InvalidEndpointError: If either vertex is not in the graph
            InvalidWeightError: If the weight is negative or not an integer
            InvalidOperationError: If an algorithm is running
        """
        self._check_mutable()
        self._check_endpoints(from_vertex, to_vertex)
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidWeightError(weight)

        neighbors = self._adjacency[from_vertex]
        if to_vertex not in neighbors:
            self._edge_count += 1
        neighbors[to_vertex] = weight

    def get_weight(self, from_vertex: V, to_vertex: V) -> Optional[Weight]:
        """
        Get the weight of the edge between two vertices.

        Returns:
            The edge weight, or None if the vertices are not connected

        Raises:
            InvalidEndpointError: If either vertex is not in the graph
        """
        self._check_endpoints(from_vertex, to_vertex)
        return self._adjacency[from_vertex].get(to_vertex)

    def _check_endpoints(self, from_vertex: V, to_vertex: V) -> None:
        if from_vertex not in self._adjacency:
            raise InvalidEndpointError(from_vertex, "from")
        if to_vertex not in self._adjacency:
            raise InvalidEndpointError(to_vertex, "to")

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        return list(self._adjacency)

    def get_neighbors(self, vertex: V) -> List[V]:
        """
        Get the outgoing neighbors of a vertex in edge insertion order.

        Raises:
            InvalidEndpointError: If the vertex is not in the graph
        """
        if vertex not in self._adjacency:
            raise InvalidEndpointError(vertex, "from")
        return list(self._adjacency[vertex])

    def get_edges(self) -> Iterator[EdgeTuple]:
        """Get all edges as (from_vertex, to_vertex, weight) tuples."""
        for from_vertex, neighbors in self._adjacency.items():
            for to_vertex, weight in neighbors.items():
                yield from_vertex, to_vertex, weight

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self.get_vertices())

    @contextmanager
    def _algorithm_run(self, name: str) -> Generator[None, None, None]:
        """Context manager marking the graph read-only for one algorithm run."""
        if self._running is not None:
            raise InvalidOperationError(
                f"Cannot start {name} while {self._running} is running"
            )
        self._running = name
        logger.debug("Starting %s on %d vertices, %d edges", name, len(self), self._edge_count)
        try:
            yield
        finally:
            self._running = None

    def run_bfs(self, start: V, end: V) -> None:
        """
        Run a breadth-first search from ``start`` that stops once ``end`` is visited.

        Raises:
            InvalidEndpointError: If ``start`` is not in the graph
        """
        with self._algorithm_run("BFS"):
            BreadthFirstSearch(self, self._observers).run(start, end)

    def run_dfs(self, start: V, end: V) -> None:
        """
        Run a depth-first search from ``start`` that stops once ``end`` is visited.

        Raises:
            InvalidEndpointError: If ``start`` is not in the graph
        """
        with self._algorithm_run("DFS"):
            DepthFirstSearch(self, self._observers).run(start, end)

    def run_dijkstra(self, start: V, end: V) -> None:
        """
        Run Dijkstra's algorithm from ``start`` and report the path to ``end``.

        Raises:
            InvalidEndpointError: If ``start`` or ``end`` is not in the graph
            UnreachableTargetError: If ``end`` cannot be reached from ``start``
        """
        with self._algorithm_run("Dijkstra"):
            DijkstraSearch(
                self, self._observers, selection=self._config.dijkstra_selection
            ).run(start, end)
