"""
Core type definitions and protocols.

This module provides the type variables, aliases and protocols shared by the
graph store and the algorithms built on top of it.
"""

from typing import Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar, Union

# Vertices are opaque to the engine; they only need equality and hashing.
V = TypeVar("V", bound=Hashable)

# Edge weights are non-negative integers.
Weight = int

# Dijkstra costs are integers, or math.inf for vertices not reachable from start.
Cost = Union[int, float]

# (from_vertex, to_vertex, weight)
EdgeTuple = Tuple[V, V, Weight]


class GraphProtocol(Protocol[V]):
    """Protocol defining the read operations the algorithms rely on."""

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        ...

    def get_vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        ...

    def get_neighbors(self, vertex: V) -> List[V]:
        """Get outgoing neighbors of a vertex in insertion order."""
        ...

    def get_weight(self, from_vertex: V, to_vertex: V) -> Optional[Weight]:
        """Get the weight of the edge between two vertices if it exists."""
        ...

    def get_edges(self) -> Iterator[EdgeTuple]:
        """Get all edges in the graph."""
        ...
