"""Shared test fixtures."""

from typing import Iterable, Tuple

import pytest

from graphwalk.core.config import EngineConfig
from graphwalk.core.graph import WeightedGraph
from graphwalk.observers import RecordingObserver


def build_graph(vertices: Iterable, edges: Iterable[Tuple] = (), config=None) -> WeightedGraph:
    """Build a graph from vertices and (from, to, weight) tuples."""
    graph = WeightedGraph(config)
    for vertex in vertices:
        graph.add_vertex(vertex)
    for from_vertex, to_vertex, weight in edges:
        graph.add_edge(from_vertex, to_vertex, weight)
    return graph


@pytest.fixture
def recorder() -> RecordingObserver:
    """Fixture providing a recording observer."""
    return RecordingObserver()


@pytest.fixture
def triangle_graph(recorder) -> WeightedGraph:
    """Fixture providing A->B(1), B->C(1), A->C(5) with a recorder attached."""
    graph = build_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    graph.add_observer(recorder)
    return graph


@pytest.fixture(params=["scan", "heap"])
def selection_config(request) -> EngineConfig:
    """Fixture providing a configuration for each Dijkstra selection strategy."""
    return EngineConfig(dijkstra_selection=request.param)
