"""
Adjacency matrix representation.

Vertices are indexed by insertion rank. Weights live in a square int32 matrix
and a parallel boolean matrix records which cells hold an edge, so weight 0
and negative weights are ordinary values rather than markers for "no edge".
Both matrices are allocated with spare capacity that doubles when exhausted.
"""

import logging
from typing import Dict, List

import numpy as np

from ..exceptions import NodeAlreadyExistsError, NodeNotFoundError
from ..models import Neighbour, Node
from .base import AdjacencyStructure

logger = logging.getLogger(__name__)

ABSENT = "-"  # Rendered in cells without an edge
INITIAL_CAPACITY = 8


class AdjacencyMatrix(AdjacencyStructure):
    """
    Graph stored as a weight matrix plus a presence bitmap.

    Re-adding an edge overwrites its weight. Neighbours are reported in
    ascending insertion index of the neighbour, which may differ from the
    order produced by the adjacency list for the same input.

    Attributes:
        _nodes (List[Node]): Vertices in insertion order
        _index (Dict[str, int]): Name to row/column index
        _weights (np.ndarray): Edge weights, meaningful where _present is set
        _present (np.ndarray): True where an edge exists; only the leading
            len(_nodes) rows and columns are in use
    """

    title = "Adjacency Matrix"

    def __init__(self):
        self._nodes: List[Node] = []
        self._index: Dict[str, int] = {}
        self._weights = np.zeros((INITIAL_CAPACITY, INITIAL_CAPACITY), dtype=np.int32)
        self._present = np.zeros((INITIAL_CAPACITY, INITIAL_CAPACITY), dtype=bool)

    def _position(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def add_node(self, name: str) -> Node:
        if name in self._index:
            raise NodeAlreadyExistsError(name)
        node = Node(name)

        if len(self._nodes) == self.capacity:
            self._grow()

        self._index[name] = len(self._nodes)
        self._nodes.append(node)
        return node

    @property
    def capacity(self) -> int:
        """Number of rows allocated, used or not."""
        return self._weights.shape[0]

    def _grow(self) -> None:
        # New cells start without an edge
        extra = self.capacity
        self._weights = np.pad(self._weights, ((0, extra), (0, extra)), constant_values=0)
        self._present = np.pad(self._present, ((0, extra), (0, extra)), constant_values=False)
        logger.debug(f"Matrix capacity grown to {self.capacity}x{self.capacity}")

    def get_node(self, name: str) -> Node:
        return self._nodes[self._position(name)]

    def _link(self, first: str, second: str, weight: int) -> None:
        row = self._position(first)
        column = self._position(second)

        self._weights[row, column] = weight
        self._weights[column, row] = weight
        self._present[row, column] = True
        self._present[column, row] = True

    def weighted_neighbours(self, name: str) -> List[Neighbour]:
        row = self._position(name)
        return [
            Neighbour(self._nodes[column], int(self._weights[row, column]))
            for column in np.flatnonzero(self._present[row, : len(self._nodes)])
        ]

    def nodes(self) -> List[Node]:
        return list(self._nodes)

    def has_node(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def _render_body(self) -> List[str]:
        if not self._nodes:
            return []

        cells = [
            [
                str(int(self._weights[row, column])) if self._present[row, column] else ABSENT
                for column in range(len(self._nodes))
            ]
            for row in range(len(self._nodes))
        ]
        names = [node.name for node in self._nodes]
        label_width = max(len(name) for name in names)
        cell_width = max(len(value) for value in names + [c for row in cells for c in row])

        header = " " * label_width + "".join(f" {name:>{cell_width}}" for name in names)
        lines = [header]
        for name, row in zip(names, cells):
            lines.append(f"{name:<{label_width}}" + "".join(f" {c:>{cell_width}}" for c in row))
        return lines
