"""
Conversion between WeightedGraph and plain graph descriptions.

A description is a dict of the form::

    {
        "vertices": ["A", "B", "C"],
        "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "B", "to": "C", "weight": 2},
        ],
    }

Descriptions are checked against a JSON schema before the graph is built, so
structural problems are reported as ValidationError while graph-level
problems (duplicate vertices, unknown endpoints) surface as the graph store's
own errors. Vertices must be JSON scalars in a description.
"""

from typing import Any, Dict, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .config import EngineConfig
from .exceptions import ValidationError
from .graph import WeightedGraph

VERTEX_SCHEMA: Dict[str, Any] = {"type": ["string", "integer", "number", "boolean"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "vertices": {"type": "array", "items": VERTEX_SCHEMA},
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": VERTEX_SCHEMA,
                    "to": VERTEX_SCHEMA,
                    "weight": {"type": "integer", "minimum": 0},
                },
                "required": ["from", "to", "weight"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["vertices"],
}


def validate_description(data: Dict[str, Any]) -> None:
    """
    Validate a graph description against GRAPH_SCHEMA.

    Raises:
        ValidationError: If the description does not match the schema
    """
    try:
        validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid graph description: {e.message}") from e


def graph_from_dict(
    data: Dict[str, Any], config: Optional[EngineConfig] = None
) -> WeightedGraph:
    """
    Build a graph from a description.

    Vertices are added in list order, then edges in list order, so neighbor
    iteration order follows the description.

    Raises:
        ValidationError: If the description does not match the schema
        DuplicateVertexError: If a vertex is listed twice
        InvalidEndpointError: If an edge references an unlisted vertex
    """
    validate_description(data)
    graph: WeightedGraph = WeightedGraph(config)
    for vertex in data["vertices"]:
        graph.add_vertex(vertex)
    for edge in data.get("edges", []):
        graph.add_edge(edge["from"], edge["to"], edge["weight"])
    return graph


def graph_to_dict(graph: WeightedGraph) -> Dict[str, Any]:
    """Describe a graph as a dict accepted by graph_from_dict."""
    return {
        "vertices": graph.get_vertices(),
        "edges": [
            {"from": from_vertex, "to": to_vertex, "weight": weight}
            for from_vertex, to_vertex, weight in graph.get_edges()
        ],
    }
