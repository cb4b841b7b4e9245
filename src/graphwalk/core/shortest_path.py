"""
Dijkstra's shortest path algorithm.

The search always finishes every vertex of the graph, not only the target,
so the complete single-source shortest-path tree is available once it ends.
The minimum-cost path to the target is then rebuilt by walking predecessor
links backwards from the target.

Vertex selection breaks ties towards the vertex inserted into the graph
first. Two interchangeable selectors implement this:

- ScanSelector checks every unfinished vertex on each step.
- HeapSelector keeps a binary heap keyed by (cost, insertion index).

Both produce the same finish order for the same graph.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Dict, Generic, List, Set, Tuple, Type

from .events import AlgorithmEvent, ObserverRegistry
from .exceptions import ConfigurationError, InvalidEndpointError, UnreachableTargetError
from .types import Cost, GraphProtocol, V

logger = logging.getLogger(__name__)

INFINITY = math.inf

_NO_VERTEX = object()


@dataclass
class ShortestPathTree(Generic[V]):
    """
    Result of a completed Dijkstra run.

    Attributes:
        start: Source vertex
        costs: Minimum cost from ``start`` per vertex (``math.inf`` if unreachable)
        predecessors: Previous vertex on the best path, for every reached
            vertex other than ``start``
        finish_order: Vertices in the order their cost became final
    """

    start: V
    costs: Dict[V, Cost]
    predecessors: Dict[V, V]
    finish_order: List[V]

    def cost_to(self, vertex: V) -> Cost:
        """Minimum cost from start to ``vertex``."""
        if vertex not in self.costs:
            raise InvalidEndpointError(vertex, "end")
        return self.costs[vertex]

    def is_reachable(self, vertex: V) -> bool:
        """Check whether ``vertex`` can be reached from start."""
        return self.cost_to(vertex) != INFINITY

    def path_to(self, end: V) -> List[V]:
        """
        Rebuild the minimum-cost path from start to ``end``.

        Returns:
            Vertices from start to ``end`` inclusive; ``[start]`` when ``end`` is start

        Raises:
            InvalidEndpointError: If ``end`` was not part of the search
            UnreachableTargetError: If the predecessor chain does not lead back to start
        """
        if end not in self.costs:
            raise InvalidEndpointError(end, "end")

        path = [end]
        current = end
        while current != self.start:
            if current not in self.predecessors:
                raise UnreachableTargetError(self.start, end)
            current = self.predecessors[current]
            path.append(current)

        path.reverse()
        return path


class VertexSelector(ABC, Generic[V]):
    """Chooses the next vertex for Dijkstra to finish."""

    def __init__(self, vertices: List[V], costs: Dict[V, Cost], finished: Set[V]):
        self.vertices = vertices
        self.costs = costs
        self.finished = finished

    def update(self, vertex: V, cost: Cost) -> None:
        """Record that the cost of ``vertex`` decreased to ``cost``."""

    @abstractmethod
    def select(self) -> V:
        """Return the unfinished vertex with minimum cost, earliest inserted on ties."""


class ScanSelector(VertexSelector[V]):
    """Linear scan over all unfinished vertices."""

    def select(self) -> V:
        best = _NO_VERTEX
        best_cost: Cost = INFINITY
        for vertex in self.vertices:
            if vertex in self.finished:
                continue
            if best is _NO_VERTEX or self.costs[vertex] < best_cost:
                best = vertex
                best_cost = self.costs[vertex]
        return best


class HeapSelector(VertexSelector[V]):
    """Binary heap keyed by (cost, insertion index) with lazy deletion."""

    def __init__(self, vertices: List[V], costs: Dict[V, Cost], finished: Set[V]):
        super().__init__(vertices, costs, finished)
        self._index = {vertex: i for i, vertex in enumerate(vertices)}
        self._heap: List[Tuple[Cost, int]] = []
        self._next_unreached = 0
        for vertex in vertices:
            if costs[vertex] != INFINITY:
                self.update(vertex, costs[vertex])

    def update(self, vertex: V, cost: Cost) -> None:
        heappush(self._heap, (cost, self._index[vertex]))

    def select(self) -> V:
        while self._heap:
            cost, index = heappop(self._heap)
            vertex = self.vertices[index]
            if vertex not in self.finished and cost == self.costs[vertex]:
                return vertex

        # Only unreachable vertices remain; take them in insertion order.
        while self.vertices[self._next_unreached] in self.finished:
            self._next_unreached += 1
        return self.vertices[self._next_unreached]


SELECTORS: Dict[str, Type[VertexSelector]] = {
    "scan": ScanSelector,
    "heap": HeapSelector,
}


class DijkstraSearch(Generic[V]):
    """Dijkstra's algorithm over a non-negatively weighted graph."""

    def __init__(
        self,
        graph: GraphProtocol[V],
        observers: ObserverRegistry[V],
        selection: str = "scan",
    ):
        """
        Initialize search.

        Args:
            graph: The graph to search
            observers: Registry notified of search progress
            selection: Vertex selection strategy, "scan" or "heap"

        Raises:
            ConfigurationError: If the selection strategy is unknown
        """
        if selection not in SELECTORS:
            raise ConfigurationError(
                f"Unknown Dijkstra selection '{selection}'. "
                f"Must be one of: {', '.join(SELECTORS)}"
            )
        self.graph = graph
        self.observers = observers
        self.selection = selection

    def run(self, start: V, end: V) -> ShortestPathTree[V]:
        """
        Finish every vertex, then report the minimum-cost path to ``end``.

        Observers receive DIJKSTRA_BEGUN, one DIJKSTRA_VERTEX_FINISHED per
        vertex in non-decreasing cost order, then DIJKSTRA_OVER with the path.

        Returns:
            The full shortest-path tree rooted at ``start``

        Raises:
            InvalidEndpointError: If ``start`` or ``end`` is not in the graph
            UnreachableTargetError: If ``end`` cannot be reached from ``start``
        """
        if not self.graph.contains_vertex(start):
            raise InvalidEndpointError(start, "start")
        if not self.graph.contains_vertex(end):
            raise InvalidEndpointError(end, "end")

        self.observers.notify(AlgorithmEvent.DIJKSTRA_BEGUN)

        vertices = self.graph.get_vertices()
        costs: Dict[V, Cost] = {vertex: INFINITY for vertex in vertices}
        costs[start] = 0
        predecessors: Dict[V, V] = {}
        finished: Set[V] = set()
        finish_order: List[V] = []
        selector = SELECTORS[self.selection](vertices, costs, finished)

        while len(finished) < len(vertices):
            current = selector.select()
            finished.add(current)
            finish_order.append(current)
            current_cost = costs[current]
            logger.debug("Finished %r with cost %s", current, current_cost)
            self.observers.notify(
                AlgorithmEvent.DIJKSTRA_VERTEX_FINISHED, current, current_cost
            )

            if current_cost == INFINITY:
                continue

            for neighbor in self.graph.get_neighbors(current):
                if neighbor in finished:
                    continue
                new_cost = current_cost + self.graph.get_weight(current, neighbor)
                if new_cost < costs[neighbor]:
                    logger.debug(
                        "  Relaxing %r: %s -> %s via %r",
                        neighbor,
                        costs[neighbor],
                        new_cost,
                        current,
                    )
                    costs[neighbor] = new_cost
                    predecessors[neighbor] = current
                    selector.update(neighbor, new_cost)

        tree = ShortestPathTree(
            start=start, costs=costs, predecessors=predecessors, finish_order=finish_order
        )
        path = tree.path_to(end)
        logger.debug("Shortest path to %r: %r (cost %s)", end, path, costs[end])
        self.observers.notify(AlgorithmEvent.DIJKSTRA_OVER, path)
        return tree
