"""Core graph functionality."""

from .config import EngineConfig
from .events import AlgorithmEvent, GraphAlgorithmObserver, ObserverRegistry
from .exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    GraphOperationError,
    InvalidEndpointError,
    InvalidOperationError,
    InvalidWeightError,
    UnreachableTargetError,
    ValidationError,
)
from .graph import WeightedGraph
from .serialization import graph_from_dict, graph_to_dict
from .shortest_path import DijkstraSearch, ShortestPathTree
from .traversal import BreadthFirstSearch, DepthFirstSearch
from .types import GraphProtocol

__all__ = [
    "AlgorithmEvent",
    "BreadthFirstSearch",
    "ConfigurationError",
    "DepthFirstSearch",
    "DijkstraSearch",
    "DuplicateVertexError",
    "EngineConfig",
    "GraphAlgorithmObserver",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidEndpointError",
    "InvalidOperationError",
    "InvalidWeightError",
    "ObserverRegistry",
    "ShortestPathTree",
    "UnreachableTargetError",
    "ValidationError",
    "WeightedGraph",
    "graph_from_dict",
    "graph_to_dict",
]
