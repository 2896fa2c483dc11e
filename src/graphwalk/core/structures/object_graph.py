"""
Object graph representation.

Every vertex object carries its own list of incident edges. The vertices live
in an arena (a list with stable indices) and edge entries refer to their
neighbour by arena index, so the structure holds no reference cycles.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..exceptions import NodeAlreadyExistsError, NodeNotFoundError
from ..models import Neighbour, Node
from .base import AdjacencyStructure


@dataclass(frozen=True)
class ArenaEdge:
    """Edge entry stored on a vertex: arena index of the neighbour and weight."""

    target: int
    weight: int


@dataclass(frozen=True, eq=False)
class ObjectNode(Node):
    """
    Node handle that owns its outgoing edges.

    Equality and hashing are inherited from Node and use the name only.

    Attributes:
        index (int): Position of the node in the owning arena
        edges (List[ArenaEdge]): Incident edges in insertion order
    """

    index: int = 0
    edges: List[ArenaEdge] = field(default_factory=list, repr=False)


class ObjectGraph(AdjacencyStructure):
    """
    Graph stored as vertex objects with embedded edge lists.

    Neighbour order equals edge-insertion order, exactly as in AdjacencyList.
    """

    title = "Object Graph"

    def __init__(self):
        self._arena: List[ObjectNode] = []
        self._index: Dict[str, int] = {}

    def _vertex(self, name: str) -> ObjectNode:
        try:
            return self._arena[self._index[name]]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def add_node(self, name: str) -> Node:
        if name in self._index:
            raise NodeAlreadyExistsError(name)
        node = ObjectNode(name, index=len(self._arena))
        self._index[name] = node.index
        self._arena.append(node)
        return node

    def get_node(self, name: str) -> Node:
        return self._vertex(name)

    def _link(self, first: str, second: str, weight: int) -> None:
        first_node = self._vertex(first)
        second_node = self._vertex(second)

        first_node.edges.append(ArenaEdge(second_node.index, weight))
        if first_node.index != second_node.index:
            second_node.edges.append(ArenaEdge(first_node.index, weight))

    def weighted_neighbours(self, name: str) -> List[Neighbour]:
        return [
            Neighbour(self._arena[edge.target], edge.weight) for edge in self._vertex(name).edges
        ]

    def nodes(self) -> List[Node]:
        return list(self._arena)

    def has_node(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._arena)

    def _render_body(self) -> List[str]:
        lines = []
        for node in self._arena:
            entries = ", ".join(
                f"{self._arena[edge.target].name} ({edge.weight})" for edge in node.edges
            )
            lines.append(f"{node.name}: {entries or '(none)'}")
        return lines
