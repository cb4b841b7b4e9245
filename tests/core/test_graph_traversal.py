"""Tests for breadth-first and depth-first search."""

import pytest

from graphwalk.core.events import AlgorithmEvent, ObserverRegistry
from graphwalk.core.exceptions import InvalidEndpointError
from graphwalk.core.traversal import BreadthFirstSearch, DepthFirstSearch
from graphwalk.observers import RecordingObserver

from conftest import build_graph

# A -> B, A -> C, B -> D, C -> D, D -> E
DIAMOND_EDGES = [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1), ("D", "E", 1)]


def run_search(method, graph, start, end):
    recorder = RecordingObserver()
    graph.add_observer(recorder)
    getattr(graph, method)(start, end)
    return recorder


def test_bfs_single_vertex():
    """Test BFS from a vertex to itself."""
    graph = build_graph("A")
    recorder = run_search("run_bfs", graph, "A", "A")

    assert recorder.events == [
        (AlgorithmEvent.BFS_BEGUN, ()),
        (AlgorithmEvent.VERTEX_VISITED, ("A",)),
        (AlgorithmEvent.SEARCH_OVER, ()),
    ]


def test_dfs_disconnected_target():
    """Test DFS towards a vertex with no path to it."""
    graph = build_graph("AB")
    recorder = run_search("run_dfs", graph, "A", "B")

    assert recorder.events == [
        (AlgorithmEvent.DFS_BEGUN, ()),
        (AlgorithmEvent.VERTEX_VISITED, ("A",)),
    ]


def test_bfs_visit_order():
    """Test that BFS visits level by level in neighbor insertion order."""
    graph = build_graph("ABCDE", DIAMOND_EDGES)
    recorder = run_search("run_bfs", graph, "A", "E")

    assert recorder.visited == ["A", "B", "C", "D", "E"]
    assert recorder.event_types[-1] is AlgorithmEvent.SEARCH_OVER


def test_dfs_visit_order():
    """Test that DFS follows the most recently pushed neighbor first."""
    graph = build_graph("ABCDE", DIAMOND_EDGES)
    recorder = run_search("run_dfs", graph, "A", "E")

    # C is pushed after B, so it is explored first.
    assert recorder.visited == ["A", "C", "D", "E"]
    assert recorder.search_over


@pytest.mark.parametrize("method", ["run_bfs", "run_dfs"])
def test_search_stops_at_target(method):
    """Test that nothing is visited after the target."""
    graph = build_graph("ABCDE", DIAMOND_EDGES)
    recorder = run_search(method, graph, "A", "B")

    assert recorder.visited[-1] == "B"
    assert recorder.event_types[-2:] == [AlgorithmEvent.VERTEX_VISITED, AlgorithmEvent.SEARCH_OVER]
    assert recorder.event_types.count(AlgorithmEvent.SEARCH_OVER) == 1


@pytest.mark.parametrize("method", ["run_bfs", "run_dfs"])
def test_search_unreachable_target_visits_reachable_once(method):
    """Test that an unreachable target exhausts the reachable set silently."""
    edges = [("A", "B", 1), ("B", "A", 1), ("B", "C", 1), ("C", "A", 1), ("X", "A", 1)]
    graph = build_graph("ABCX", edges)
    recorder = run_search(method, graph, "A", "X")

    assert sorted(recorder.visited) == ["A", "B", "C"]
    assert len(recorder.visited) == len(set(recorder.visited))
    assert not recorder.search_over


@pytest.mark.parametrize("method", ["run_bfs", "run_dfs"])
def test_search_with_cycles_has_no_repeats(method):
    """Test that cycles and self-loops never cause a revisit."""
    edges = [("A", "A", 1), ("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("C", "D", 1)]
    graph = build_graph("ABCD", edges)
    recorder = run_search(method, graph, "A", "D")

    assert recorder.visited == ["A", "B", "C", "D"]


@pytest.mark.parametrize("method", ["run_bfs", "run_dfs"])
def test_search_missing_start(method):
    """Test that an unknown start vertex fails before any notification."""
    graph = build_graph("A")
    recorder = RecordingObserver()
    graph.add_observer(recorder)

    with pytest.raises(InvalidEndpointError) as exc_info:
        getattr(graph, method)("X", "A")
    assert exc_info.value.role == "start"
    assert recorder.events == []


@pytest.mark.parametrize("method", ["run_bfs", "run_dfs"])
def test_search_missing_end_is_not_an_error(method):
    """Test that an unknown target behaves like an unreachable one."""
    graph = build_graph("AB", [("A", "B", 1)])
    recorder = run_search(method, graph, "A", "X")

    assert recorder.visited == ["A", "B"]
    assert not recorder.search_over


def test_bfs_skips_stale_frontier_entries():
    """Test that a vertex queued twice is visited once and expanded once."""
    # D is queued by both B and C before it is visited.
    graph = build_graph("ABCDE", DIAMOND_EDGES)
    registry = ObserverRegistry()
    order = BreadthFirstSearch(graph, registry).run("A", "missing")

    assert order == ["A", "B", "C", "D", "E"]


def test_dfs_runner_returns_visit_order():
    """Test using the DFS runner directly without the graph entry point."""
    graph = build_graph("ABC", [("A", "B", 1), ("B", "C", 1)])
    registry = ObserverRegistry()
    recorder = RecordingObserver()
    registry.add_observer(recorder)

    order = DepthFirstSearch(graph, registry).run("A", "C")

    assert order == ["A", "B", "C"]
    assert recorder.visited == order


def test_search_is_repeatable():
    """Test that running the same search twice gives identical traces."""
    graph = build_graph("ABCDE", DIAMOND_EDGES)
    first = run_search("run_dfs", graph, "A", "E")
    second = run_search("run_dfs", graph, "A", "E")

    # The first recorder saw both runs.
    assert first.events == second.events * 2
