"""
Package-level tests.
"""

import graphwalk
from graphwalk import AlgorithmEvent, GraphAlgorithmObserver, WeightedGraph
from graphwalk.adapters import GridMaze, MazeGraph


def test_package_exports():
    """Test the commonly used names are importable from the package."""
    assert graphwalk.__version__ == "0.1.0"
    assert set(graphwalk.__all__) == {"AlgorithmEvent", "GraphAlgorithmObserver", "WeightedGraph"}


def test_package_metadata():
    """Test the package metadata refers to nothing missing from the distribution."""
    assert graphwalk.__author__ == "graphwalk Team"
    assert not hasattr(graphwalk, "__license__")


def test_build_observe_and_run_every_algorithm():
    """Test a client building a graph, observing it and running every algorithm."""
    calls = []

    class Tracer(GraphAlgorithmObserver):
        def on_bfs_begun(self):
            calls.append("bfs")

        def on_dfs_begun(self):
            calls.append("dfs")

        def on_dijkstra_begun(self):
            calls.append("dijkstra")

        def on_dijkstra_over(self, path):
            calls.append(tuple(path))

    graph = WeightedGraph()
    for vertex in "ABC":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("A", "C", 5)
    graph.add_observer(Tracer())

    graph.run_bfs("A", "C")
    graph.run_dfs("A", "C")
    graph.run_dijkstra("A", "C")

    assert calls == ["bfs", "dfs", "dijkstra", ("A", "B", "C")]
    assert AlgorithmEvent.DIJKSTRA_OVER.value == "on_dijkstra_over"


def test_maze_graph_is_weighted_graph():
    """Test that adapters produce ordinary graphs."""
    assert isinstance(MazeGraph(GridMaze(width=1, height=1)), WeightedGraph)
