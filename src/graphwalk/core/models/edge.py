"""
Edge models for the graph library.

Edges are undirected and carry an integer weight. Structures report them from
the point of view of one endpoint as Neighbour entries.
"""

from dataclasses import dataclass

from .node import Node


@dataclass(frozen=True)
class Neighbour:
    """
    One entry of a node's neighbour list.

    Attributes:
        node (Node): The adjacent node
        weight (int): Weight of the connecting edge (zero and negative allowed)
    """

    node: Node
    weight: int

    def __str__(self) -> str:
        return f"{self.node.name} ({self.weight})"
