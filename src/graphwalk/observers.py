"""
Concrete algorithm observers.

RecordingObserver keeps every notification it receives so a run can be
replayed or asserted on; LoggingObserver writes each notification to a logger.
"""

import logging
from typing import Any, List, Optional, Tuple

from .core.config import EngineConfig
from .core.events import AlgorithmEvent, GraphAlgorithmObserver
from .core.types import Cost, V

logger = logging.getLogger(__name__)


class RecordingObserver(GraphAlgorithmObserver[V]):
    """
    Observer that records notifications in the order received.

    Attributes:
        events (List[Tuple[AlgorithmEvent, Tuple]]): (event, arguments) pairs
    """

    def __init__(self):
        self.events: List[Tuple[AlgorithmEvent, Tuple[Any, ...]]] = []

    def _record(self, event: AlgorithmEvent, *args: Any) -> None:
        self.events.append((event, args))

    def on_bfs_begun(self) -> None:
        self._record(AlgorithmEvent.BFS_BEGUN)

    def on_dfs_begun(self) -> None:
        self._record(AlgorithmEvent.DFS_BEGUN)

    def on_dijkstra_begun(self) -> None:
        self._record(AlgorithmEvent.DIJKSTRA_BEGUN)

    def on_vertex_visited(self, vertex: V) -> None:
        self._record(AlgorithmEvent.VERTEX_VISITED, vertex)

    def on_dijkstra_vertex_finished(self, vertex: V, cost: Cost) -> None:
        self._record(AlgorithmEvent.DIJKSTRA_VERTEX_FINISHED, vertex, cost)

    def on_search_over(self) -> None:
        self._record(AlgorithmEvent.SEARCH_OVER)

    def on_dijkstra_over(self, path: List[V]) -> None:
        self._record(AlgorithmEvent.DIJKSTRA_OVER, list(path))

    @property
    def event_types(self) -> List[AlgorithmEvent]:
        """Recorded events without their arguments."""
        return [event for event, _ in self.events]

    @property
    def visited(self) -> List[V]:
        """Vertices reported by VERTEX_VISITED, in order."""
        return [args[0] for event, args in self.events if event is AlgorithmEvent.VERTEX_VISITED]

    @property
    def finished(self) -> List[Tuple[V, Cost]]:
        """(vertex, cost) pairs reported by DIJKSTRA_VERTEX_FINISHED, in order."""
        return [
            (args[0], args[1])
            for event, args in self.events
            if event is AlgorithmEvent.DIJKSTRA_VERTEX_FINISHED
        ]

    @property
    def search_over(self) -> bool:
        """Whether SEARCH_OVER was received."""
        return AlgorithmEvent.SEARCH_OVER in self.event_types

    @property
    def path(self) -> Optional[List[V]]:
        """Path reported by the last DIJKSTRA_OVER, if any."""
        for event, args in reversed(self.events):
            if event is AlgorithmEvent.DIJKSTRA_OVER:
                return args[0]
        return None

    def clear(self) -> None:
        """Forget all recorded notifications."""
        self.events.clear()


class LoggingObserver(GraphAlgorithmObserver[V]):
    """Observer that logs every notification."""

    def __init__(
        self,
        log: Optional[logging.Logger] = None,
        config: Optional[EngineConfig] = None,
    ):
        """
        Args:
            log: Logger to write to (this module's logger if omitted)
            config: Supplies the level records are written at
        """
        self.log = log or logger
        self.level = (config or EngineConfig()).log_level_number

    def on_bfs_begun(self) -> None:
        self.log.log(self.level, "BFS begun")

    def on_dfs_begun(self) -> None:
        self.log.log(self.level, "DFS begun")

    def on_dijkstra_begun(self) -> None:
        self.log.log(self.level, "Dijkstra begun")

    def on_vertex_visited(self, vertex: V) -> None:
        self.log.log(self.level, "Visited %r", vertex)

    def on_dijkstra_vertex_finished(self, vertex: V, cost: Cost) -> None:
        self.log.log(self.level, "Finished %r with cost %s", vertex, cost)

    def on_search_over(self) -> None:
        self.log.log(self.level, "Search over")

    def on_dijkstra_over(self, path: List[V]) -> None:
        self.log.log(self.level, "Dijkstra over, path: %s", " -> ".join(map(repr, path)))
