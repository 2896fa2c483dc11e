"""
Graph module for the graphwalk library.

This module provides the Graph facade combining one adjacency structure with
the loader and the traversal engine:
- Loading graph files into a representation chosen at load time
- Node and edge registration with uniform error semantics
- Neighbour queries whose order is specific to the representation
- Recursive and iterative depth-first and breadth-first traversal
- Textual rendering of the underlying structure
"""

from typing import List, Optional, Sequence, Union

from ..enums import GraphType, TraversalAlgorithm
from ..models import Neighbour, Node
from ..structures import STRUCTURES, AdjacencyStructure, create_structure
from .events import CollectingVisitSink, StreamVisitSink, VisitEvent, VisitSink
from .loader import GraphLoader, load_structure
from .metrics import TraversalMetrics
from .traversal import (
    BFSIterator,
    GraphIterator,
    IterativeDFSIterator,
    RecursiveDFSIterator,
    TraversalResult,
    iterate,
    run_traversal,
)


class Graph:
    """
    Undirected weighted graph backed by a single adjacency structure.

    The representation is fixed when the graph is created. After loading the
    graph is meant to be read only; traversals never modify it.
    """

    def __init__(
        self,
        graph_type: Union[GraphType, str] = GraphType.ADJACENCY_LIST,
        structure: Optional[AdjacencyStructure] = None,
    ):
        """
        Initialize an empty graph, or wrap an existing structure.

        Args:
            graph_type (GraphType): Representation to create
            structure (Optional[AdjacencyStructure]): Prebuilt structure; its
                type must match graph_type
        """
        self._graph_type = GraphType.coerce(graph_type)
        if structure is None:
            structure = create_structure(self._graph_type)
        elif not isinstance(structure, STRUCTURES[self._graph_type]):
            raise ValueError(
                f"{type(structure).__name__} does not implement {self._graph_type.value}"
            )
        self._structure = structure

    @property
    def graph_type(self) -> GraphType:
        """Representation chosen at construction."""
        return self._graph_type

    @property
    def structure(self) -> AdjacencyStructure:
        """The underlying adjacency structure."""
        return self._structure

    @classmethod
    def load(
        cls, path: str, graph_type: Union[GraphType, str] = GraphType.ADJACENCY_LIST
    ) -> "Graph":
        """
        Load a graph file.

        Args:
            path (str): Path of the UTF-8 graph file
            graph_type (GraphType): Representation to build

        Returns:
            Graph: The loaded graph

        Raises:
            GraphIOError: If the file cannot be read
            EmptyFileError: If the file has no lines
            InvalidFileFormatError: If a line cannot be parsed
            NodeNotFoundError: If an edge references an unknown node
            NodeAlreadyExistsError: If a node name is repeated
        """
        return cls(graph_type, structure=load_structure(path, graph_type))

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], graph_type: Union[GraphType, str] = GraphType.ADJACENCY_LIST
    ) -> "Graph":
        """Create a graph from graph file lines that were already read."""
        graph = cls(graph_type)
        GraphLoader(graph.structure).load_lines(lines)
        return graph

    def add_node(self, name: str) -> Node:
        """Register a node."""
        return self._structure.add_node(name)

    def get_node(self, name: str) -> Node:
        """Get the handle of a registered node."""
        return self._structure.get_node(name)

    def has_node(self, name: str) -> bool:
        """Check if a node is registered."""
        return self._structure.has_node(name)

    def add_edge(self, first: str, second: str, weight: int) -> None:
        """Add an undirected edge; the weight must be a signed 32-bit integer."""
        self._structure.add_edge(first, second, weight)

    def neighbours(self, name: str) -> List[Node]:
        """Get the neighbours of a node in representation order."""
        return self._structure.neighbours(name)

    def weighted_neighbours(self, name: str) -> List[Neighbour]:
        """Get the neighbours of a node together with edge weights."""
        return self._structure.weighted_neighbours(name)

    def nodes(self) -> List[Node]:
        """Get all nodes in insertion order."""
        return self._structure.nodes()

    def iterator(
        self, start_name: str, algorithm: Union[TraversalAlgorithm, str]
    ) -> GraphIterator:
        """
        Get an iterator yielding nodes in traversal order without emitting events.

        Raises:
            NodeNotFoundError: If the start node does not exist
            ValueError: If the algorithm is not recognized
        """
        return iterate(self._structure, start_name, algorithm)

    def traverse(
        self,
        start_name: str,
        algorithm: Union[TraversalAlgorithm, str] = TraversalAlgorithm.DFS_RECURSIVE,
        sink: Optional[VisitSink] = None,
    ) -> TraversalResult:
        """
        Traverse the graph from a start node.

        Each reachable node produces exactly one visit event. Without a sink
        the events are written to standard output as ``Visiting: <name>``.

        Args:
            start_name (str): Name of the start node
            algorithm (TraversalAlgorithm): Traversal strategy
            sink (Optional[VisitSink]): Receiver of visit events

        Returns:
            TraversalResult: Visit order and metrics

        Raises:
            NodeNotFoundError: If the start node does not exist
        """
        return run_traversal(self._structure, start_name, algorithm, sink)

    def render(self) -> str:
        """Get a human readable depiction of the underlying structure."""
        return self._structure.render()

    def __len__(self) -> int:
        return len(self._structure)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._structure.has_node(name)

    def __str__(self) -> str:
        return self.render()


def load(path: str, graph_type: Union[GraphType, str] = GraphType.ADJACENCY_LIST) -> Graph:
    """Load a graph file into the requested representation."""
    return Graph.load(path, graph_type)


__all__ = [
    "BFSIterator",
    "CollectingVisitSink",
    "Graph",
    "GraphIterator",
    "GraphLoader",
    "IterativeDFSIterator",
    "RecursiveDFSIterator",
    "StreamVisitSink",
    "TraversalMetrics",
    "TraversalResult",
    "VisitEvent",
    "VisitSink",
    "load",
]
