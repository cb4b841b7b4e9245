"""Tests for graph description conversion."""

import pytest

from graphwalk.core.config import EngineConfig
from graphwalk.core.exceptions import (
    DuplicateVertexError,
    InvalidEndpointError,
    InvalidWeightError,
    ValidationError,
)
from graphwalk.core.serialization import graph_from_dict, graph_to_dict, validate_description

from conftest import build_graph


def test_graph_from_dict():
    """Test building a graph from a description."""
    graph = graph_from_dict(
        {
            "vertices": ["A", "B", "C"],
            "edges": [
                {"from": "A", "to": "C", "weight": 5},
                {"from": "A", "to": "B", "weight": 1},
            ],
        }
    )

    assert graph.get_vertices() == ["A", "B", "C"]
    assert graph.get_neighbors("A") == ["C", "B"]
    assert graph.get_weight("A", "C") == 5


def test_graph_from_dict_without_edges():
    """Test that the edge list is optional."""
    graph = graph_from_dict({"vertices": [1, 2]})

    assert graph.get_vertices() == [1, 2]
    assert graph.edge_count == 0


def test_graph_from_dict_passes_config():
    """Test that the configuration reaches the built graph."""
    config = EngineConfig(dijkstra_selection="heap")

    assert graph_from_dict({"vertices": []}, config).config is config


def test_graph_to_dict_round_trip():
    """Test that describing and rebuilding a graph preserves it."""
    graph = build_graph("ABC", [("B", "A", 2), ("A", "C", 0), ("A", "B", 1)])

    rebuilt = graph_from_dict(graph_to_dict(graph))

    assert rebuilt.get_vertices() == graph.get_vertices()
    assert list(rebuilt.get_edges()) == list(graph.get_edges())


@pytest.mark.parametrize(
    "description",
    [
        {},
        {"vertices": "ABC"},
        {"vertices": [["A"]]},
        {"vertices": ["A"], "edges": [{"from": "A", "to": "A"}]},
        {"vertices": ["A"], "edges": [{"from": "A", "to": "A", "weight": -1}]},
        {"vertices": ["A"], "edges": [{"from": "A", "to": "A", "weight": "1"}]},
        {"vertices": ["A"], "edges": [{"from": "A", "to": "A", "weight": 1, "label": "x"}]},
    ],
)
def test_invalid_description(description):
    """Test that malformed descriptions are rejected by schema validation."""
    with pytest.raises(ValidationError, match="Invalid graph description"):
        validate_description(description)


def test_negative_weight_is_a_weight_error():
    """Test that schema rejection of a negative weight is still a ValidationError."""
    with pytest.raises(ValidationError):
        graph_from_dict({"vertices": ["A"], "edges": [{"from": "A", "to": "A", "weight": -3}]})


def test_duplicate_vertex_in_description():
    """Test that duplicate vertices surface as the store's error."""
    with pytest.raises(DuplicateVertexError):
        graph_from_dict({"vertices": ["A", "A"]})


def test_unknown_endpoint_in_description():
    """Test that edges to unlisted vertices surface as the store's error."""
    with pytest.raises(InvalidEndpointError):
        graph_from_dict({"vertices": ["A"], "edges": [{"from": "A", "to": "B", "weight": 1}]})


def test_integral_float_weight_rejected_by_store():
    """Test that a float weight passing the schema is rejected by the store."""
    with pytest.raises(InvalidWeightError):
        graph_from_dict({"vertices": ["A"], "edges": [{"from": "A", "to": "A", "weight": 1.0}]})
