"""
Graph search runners for breadth-first and depth-first search.

Both searches share one loop and differ only in frontier discipline: BFS
takes the oldest frontier entry (FIFO), DFS the newest (LIFO). A vertex is
visited the first time it is taken from the frontier; stale entries for
already visited vertices are skipped without expanding their neighbors.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, List, Set

from .events import AlgorithmEvent, ObserverRegistry
from .exceptions import InvalidEndpointError
from .types import GraphProtocol, V

logger = logging.getLogger(__name__)


class GraphSearch(ABC, Generic[V]):
    """Base class for target-seeking graph searches."""

    begun_event: AlgorithmEvent

    def __init__(self, graph: GraphProtocol[V], observers: ObserverRegistry[V]):
        """
        Initialize search.

        Args:
            graph: The graph to search
            observers: Registry notified of search progress
        """
        self.graph = graph
        self.observers = observers

    @abstractmethod
    def _take(self, frontier: Deque[V]) -> V:
        """Remove and return the next vertex from the frontier."""

    def run(self, start: V, end: V) -> List[V]:
        """
        Search from ``start`` until ``end`` is visited or the frontier empties.

        If ``end`` is never visited the search ends without broadcasting
        SEARCH_OVER; that is a normal outcome, not an error.

        Args:
            start: Vertex the search begins at
            end: Vertex whose visit ends the search

        Returns:
            Vertices in the order they were visited

        Raises:
            InvalidEndpointError: If ``start`` is not in the graph
        """
        if not self.graph.contains_vertex(start):
            raise InvalidEndpointError(start, "start")

        self.observers.notify(self.begun_event)
        visited: Set[V] = set()
        order: List[V] = []
        frontier: Deque[V] = deque([start])

        while frontier:
            vertex = self._take(frontier)
            if vertex in visited:
                continue

            visited.add(vertex)
            order.append(vertex)
            self.observers.notify(AlgorithmEvent.VERTEX_VISITED, vertex)

            if vertex == end:
                logger.debug("Reached %r after %d visits", end, len(order))
                self.observers.notify(AlgorithmEvent.SEARCH_OVER)
                return order

            for neighbor in self.graph.get_neighbors(vertex):
                if neighbor not in visited:
                    frontier.append(neighbor)

        logger.debug("Frontier exhausted after %d visits without reaching %r", len(order), end)
        return order


class BreadthFirstSearch(GraphSearch[V]):
    """Breadth-first search with a FIFO frontier."""

    begun_event = AlgorithmEvent.BFS_BEGUN

    def _take(self, frontier: Deque[V]) -> V:
        return frontier.popleft()


class DepthFirstSearch(GraphSearch[V]):
    """Depth-first search with a LIFO frontier."""

    begun_event = AlgorithmEvent.DFS_BEGUN

    def _take(self, frontier: Deque[V]) -> V:
        return frontier.pop()
