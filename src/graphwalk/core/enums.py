"""
Enumerations for graph representations and traversal algorithms.

Both enums use the hyphenated names accepted on the command line and in run
configurations as their values, so ``GraphType("adjacency-matrix")`` works.
"""

from enum import Enum
from typing import Union


class GraphType(Enum):
    """Adjacency representation chosen when a graph is created."""

    ADJACENCY_LIST = "adjacency-list"
    ADJACENCY_MATRIX = "adjacency-matrix"
    OBJECT_GRAPH = "object-graph"

    @classmethod
    def coerce(cls, value: Union["GraphType", str]) -> "GraphType":
        """Accept either a member or its string value."""
        if isinstance(value, cls):
            return value
        return cls(value)


class TraversalAlgorithm(Enum):
    """Traversal strategies supported by the traversal engine."""

    DFS_RECURSIVE = "dfs-recursive"
    DFS_ITERATIVE = "dfs-iterative"
    BFS_ITERATIVE = "bfs-iterative"

    @classmethod
    def coerce(cls, value: Union["TraversalAlgorithm", str]) -> "TraversalAlgorithm":
        """Accept either a member or its string value."""
        if isinstance(value, cls):
            return value
        return cls(value)
