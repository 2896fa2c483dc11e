"""
Abstract adjacency structure.

This module defines the contract shared by the three graph representations.
The contract is purely structural: implementations decide where neighbour
lists live and in which order neighbours are reported, but every
implementation must

* reject duplicate node names with NodeAlreadyExistsError,
* reject unknown names with NodeNotFoundError without modifying any state,
* accept only integer weights in the signed 32-bit range,
* record edges undirected, listing a self-loop once,
* report neighbours in an order that depends only on construction history.
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import List

from ..exceptions import InvalidWeightError
from ..models import Neighbour, Node

WEIGHT_MIN = -(2**31)
WEIGHT_MAX = 2**31 - 1


def check_weight(weight) -> int:
    """
    Validate an edge weight and return it as a plain int.

    Raises:
        InvalidWeightError: If the weight is not an integer in the signed 32-bit range
    """
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise InvalidWeightError(weight)
    if not WEIGHT_MIN <= weight <= WEIGHT_MAX:
        raise InvalidWeightError(weight)
    return int(weight)


class AdjacencyStructure(ABC):
    """Base class for graph adjacency representations."""

    #: Heading printed above the rendered structure
    title: str = "Adjacency Structure"

    @abstractmethod
    def add_node(self, name: str) -> Node:
        """
        Register a new vertex.

        Args:
            name (str): Name of the vertex

        Returns:
            Node: Handle of the new vertex

        Raises:
            NodeAlreadyExistsError: If the name is already registered
        """

    @abstractmethod
    def get_node(self, name: str) -> Node:
        """
        Get the handle for a registered vertex.

        Raises:
            NodeNotFoundError: If the name is not registered
        """

    def add_edge(self, first: str, second: str, weight: int) -> None:
        """
        Record an undirected weighted edge.

        Args:
            first (str): Name of one endpoint
            second (str): Name of the other endpoint
            weight (int): Edge weight, a signed 32-bit integer

        Raises:
            InvalidWeightError: If the weight is out of range or not an integer
            NodeNotFoundError: If either endpoint is not registered
        """
        self._link(first, second, check_weight(weight))

    @abstractmethod
    def _link(self, first: str, second: str, weight: int) -> None:
        """Store a validated edge; must not change state if an endpoint is unknown."""

    @abstractmethod
    def weighted_neighbours(self, name: str) -> List[Neighbour]:
        """
        Get the neighbours of a vertex together with the edge weights.

        Raises:
            NodeNotFoundError: If the name is not registered
        """

    @abstractmethod
    def nodes(self) -> List[Node]:
        """Get all registered vertices in insertion order."""

    def neighbours(self, name: str) -> List[Node]:
        """
        Get the neighbour handles of a vertex.

        The order matches weighted_neighbours and is specific to the
        representation.

        Raises:
            NodeNotFoundError: If the name is not registered
        """
        return [entry.node for entry in self.weighted_neighbours(name)]

    @abstractmethod
    def has_node(self, name: str) -> bool:
        """Check if a vertex is registered."""

    def render(self) -> str:
        """Produce a human readable depiction of the structure."""
        lines = [f"{self.title}:"]
        lines.extend(self._render_body())
        return "\n".join(lines)

    @abstractmethod
    def _render_body(self) -> List[str]:
        """Render the lines that follow the title."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of registered vertices."""

    def __str__(self) -> str:
        return self.render()
