"""
graphwalk - Adjacency representations and classical graph traversals

This package loads weighted undirected graphs from a small text format into
one of three interchangeable adjacency representations and traverses them:

- Adjacency list, adjacency matrix and object graph storage
- Recursive depth-first, iterative depth-first and breadth-first traversal
- Injectable visit sinks for capturing traversal output
- A command line interface for loading, printing and traversing graph files
"""

__version__ = "0.1.0"
__author__ = "graphwalk Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("graphwalk requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.enums import GraphType, TraversalAlgorithm
from .core.graph import Graph, load
from .core.models import Node

__all__ = [
    "Graph",
    "GraphType",
    "Node",
    "TraversalAlgorithm",
    "load",
]
