"""
Algorithm progress event system.

This module provides the observer side of the engine: the closed set of
progress events the algorithms emit, the observer base class that receives
them, and the registry that dispatches each event to every observer.

Dispatch is synchronous and ordered. An algorithm does not take its next step
until every observer has returned from the current callback, and observers
are called in the order they were registered. A slow observer therefore slows
the algorithm down, which is what step-by-step visualisation relies on.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, List

from .types import Cost, V

logger = logging.getLogger(__name__)


class AlgorithmEvent(Enum):
    """Events emitted while an algorithm runs.

    Each value is the name of the observer callback that handles it.
    """

    BFS_BEGUN = "on_bfs_begun"
    DFS_BEGUN = "on_dfs_begun"
    DIJKSTRA_BEGUN = "on_dijkstra_begun"
    VERTEX_VISITED = "on_vertex_visited"  # BFS/DFS only
    DIJKSTRA_VERTEX_FINISHED = "on_dijkstra_vertex_finished"
    SEARCH_OVER = "on_search_over"  # BFS/DFS only
    DIJKSTRA_OVER = "on_dijkstra_over"


class GraphAlgorithmObserver(Generic[V]):
    """
    Base class for objects that follow algorithm progress.

    Every callback is a no-op here; subclasses override the ones relevant to
    the algorithms they observe.
    """

    def on_bfs_begun(self) -> None:
        """Called once before a breadth-first search starts."""

    def on_dfs_begun(self) -> None:
        """Called once before a depth-first search starts."""

    def on_dijkstra_begun(self) -> None:
        """Called once before Dijkstra's algorithm starts."""

    def on_vertex_visited(self, vertex: V) -> None:
        """Called each time BFS or DFS visits a vertex for the first time."""

    def on_dijkstra_vertex_finished(self, vertex: V, cost: Cost) -> None:
        """Called each time Dijkstra commits the final cost of a vertex."""

    def on_search_over(self) -> None:
        """Called when BFS or DFS visits the target vertex."""

    def on_dijkstra_over(self, path: List[V]) -> None:
        """Called with the minimum-cost path from start to end."""


@dataclass
class ObserverRegistry(Generic[V]):
    """
    Ordered collection of algorithm observers.

    Observers are kept in registration order. The same observer registered
    twice is notified twice.

    Attributes:
        _observers (List[GraphAlgorithmObserver]): Registered observers
    """

    _observers: List[GraphAlgorithmObserver[V]] = field(default_factory=list)

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Register an observer.

        Args:
            observer (GraphAlgorithmObserver): The observer to add
        """
        self._observers.append(observer)

    def notify(self, event: AlgorithmEvent, *args: Any) -> None:
        """
        Notify all observers of an algorithm event.

        Exceptions raised by an observer propagate to the caller and stop
        the notification of the observers after it.

        Args:
            event (AlgorithmEvent): The event that occurred
            *args: Arguments passed to the observer callback
        """
        logger.debug("Dispatching %s%r to %d observer(s)", event.name, args, len(self._observers))
        for observer in self._observers:
            getattr(observer, event.value)(*args)

    def clear(self) -> None:
        """Remove all observers."""
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[GraphAlgorithmObserver[V]]:
        return iter(list(self._observers))
