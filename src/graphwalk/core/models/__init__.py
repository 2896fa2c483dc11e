"""
Core domain models package for the graph library.

This package provides the node handle shared by every adjacency structure and
the neighbour entry used to report weighted adjacency.
"""

from .edge import Neighbour
from .node import Node

__all__ = [
    "Neighbour",
    "Node",
]
