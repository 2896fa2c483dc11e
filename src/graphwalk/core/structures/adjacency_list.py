"""
Adjacency list representation.

Each vertex maps to a list of neighbour entries kept in edge-insertion order.
Repeated edges are stored as repeated entries.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..exceptions import NodeAlreadyExistsError, NodeNotFoundError
from ..models import Neighbour, Node
from .base import AdjacencyStructure


@dataclass
class _ListEntry:
    node: Node
    neighbours: List[Neighbour] = field(default_factory=list)


class AdjacencyList(AdjacencyStructure):
    """
    Graph stored as an insertion ordered mapping of name to neighbour list.

    Neighbour order equals edge-insertion order.
    """

    title = "Adjacency List"

    def __init__(self):
        self._entries: Dict[str, _ListEntry] = {}

    def _entry(self, name: str) -> _ListEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def add_node(self, name: str) -> Node:
        if name in self._entries:
            raise NodeAlreadyExistsError(name)
        node = Node(name)
        self._entries[name] = _ListEntry(node)
        return node

    def get_node(self, name: str) -> Node:
        return self._entry(name).node

    def _link(self, first: str, second: str, weight: int) -> None:
        first_entry = self._entry(first)
        second_entry = self._entry(second)

        first_entry.neighbours.append(Neighbour(second_entry.node, weight))
        if first != second:
            second_entry.neighbours.append(Neighbour(first_entry.node, weight))

    def weighted_neighbours(self, name: str) -> List[Neighbour]:
        return list(self._entry(name).neighbours)

    def nodes(self) -> List[Node]:
        return [entry.node for entry in self._entries.values()]

    def has_node(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _render_body(self) -> List[str]:
        lines = []
        for name, entry in self._entries.items():
            targets = ", ".join(str(neighbour) for neighbour in entry.neighbours)
            lines.append(f"{name} -> {targets}" if targets else f"{name} ->")
        return lines
