"""
graphwalk - Observable search algorithms over weighted directed graphs

This package provides a domain-agnostic engine for directed graphs with
non-negative integer edge weights. It includes:

- A graph store with insertion-ordered, reproducible neighbor iteration
- Breadth-first search, depth-first search and Dijkstra's algorithm
- Synchronous observer notifications for step-by-step visualisation
- Adapters that turn domain models such as mazes into graphs

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "graphwalk Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("graphwalk requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.events import AlgorithmEvent, GraphAlgorithmObserver
from .core.graph import WeightedGraph

__all__ = [
    "AlgorithmEvent",
    "GraphAlgorithmObserver",
    "WeightedGraph",
]
