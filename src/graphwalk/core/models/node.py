"""
Node model for the graph library.

This module defines the handle representing a vertex. Handles are compared
and hashed by name, so two handles for the same vertex are interchangeable
regardless of which adjacency structure produced them.
"""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Node:
    """
    Handle for a named vertex of a graph.

    Attributes:
        name (str): Unique, non-empty name of the vertex within its graph
    """

    name: str

    def __post_init__(self):
        """Validate node after initialization."""
        if not isinstance(self.name, str):
            raise TypeError("name must be a string")
        if not self.name.strip():
            raise ValueError("name must be a non-empty string")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name
