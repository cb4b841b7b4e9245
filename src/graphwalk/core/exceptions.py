"""
Custom exceptions for the graph engine.

This module defines the hierarchy of exceptions raised by the graph store and
the search algorithms. Every error is a precondition violation reported
synchronously to the caller; observers are never notified of errors.
"""

from typing import Any


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Negative or non-integer edge weights
        * Graph descriptions that do not match the expected schema
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph algorithm cannot produce its result.

    Examples:
        * Shortest path requested to a target that cannot be reached
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown Dijkstra selection strategy
        * Unknown log level name
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex lookup for a vertex that was never added
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    Examples:
        * Adding a vertex that is already in the graph
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Adding vertices or edges while an algorithm is running
    """


class DuplicateVertexError(DuplicateResourceError):
    """Raised by ``add_vertex`` when the vertex is already present."""

    def __init__(self, vertex: Any):
        super().__init__(f"Vertex {vertex!r} is already in the graph")
        self.vertex = vertex


class InvalidEndpointError(ResourceNotFoundError):
    """
    Raised when an operation references a vertex absent from the graph.

    Raised by ``add_edge``, ``get_weight`` and the algorithm entry points.
    The ``role`` attribute names the argument that was rejected
    (``"from"``, ``"to"``, ``"start"`` or ``"end"``).
    """

    def __init__(self, vertex: Any, role: str):
        super().__init__(f"{role.capitalize()} vertex {vertex!r} not found in the graph")
        self.vertex = vertex
        self.role = role


class InvalidWeightError(ValidationError):
    """Raised by ``add_edge`` when the weight is negative or not an integer."""

    def __init__(self, weight: Any):
        super().__init__(f"Edge weight must be a non-negative integer, got {weight!r}")
        self.weight = weight


class UnreachableTargetError(GraphOperationError):
    """
    Raised when Dijkstra's path reconstruction cannot connect start to end.

    The full shortest-path tree has already been computed and every vertex
    reported as finished by the time this is raised.
    """

    def __init__(self, start: Any, end: Any):
        super().__init__(f"No path exists between {start!r} and {end!r}")
        self.start = start
        self.end = end
