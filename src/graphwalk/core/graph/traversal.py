"""
Graph traversal system using iterator pattern.

This module provides the three traversal strategies of the library as
iterators over an AdjacencyStructure. Iterators yield each reachable node
exactly once, in the order the strategy visits it, and follow the neighbour
order reported by the structure without sorting it. The same input therefore
yields representation-specific but deterministic visit orders.

run_traversal drives an iterator, forwards each visit to a sink and collects
timing and memory metrics.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from time import perf_counter
from typing import Dict, Iterator, List, Optional, Set, Type, Union

from ..enums import TraversalAlgorithm
from ..models import Node
from ..structures import AdjacencyStructure
from .events import StreamVisitSink, VisitEvent, VisitSink
from .metrics import TraversalMetrics

logger = logging.getLogger(__name__)


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    algorithm: TraversalAlgorithm

    def __init__(self, structure: AdjacencyStructure, start_name: str):
        """
        Initialize iterator.

        Args:
            structure: The adjacency structure to traverse
            start_name: Name of the starting node

        Raises:
            NodeNotFoundError: If start_name is not registered
        """
        self.structure = structure
        self.start = structure.get_node(start_name)
        self.visited: Set[Node] = set()

    def __iter__(self) -> Iterator[Node]:
        self.visited = set()
        return self._traverse()

    @abstractmethod
    def _traverse(self) -> Iterator[Node]:
        """
        Traverse from the start node.

        Yields:
            Nodes in visit order
        """


class RecursiveDFSIterator(GraphIterator):
    """
    Depth-first traversal that descends into neighbours in list order.

    Visits nodes in the order of a recursive pre-order walk. Each open call is
    kept on an explicit stack as an iterator over its remaining neighbours, so
    path length is not bounded by the interpreter recursion limit.
    """

    algorithm = TraversalAlgorithm.DFS_RECURSIVE

    def _traverse(self) -> Iterator[Node]:
        self.visited.add(self.start)
        yield self.start
        stack = [iter(self.structure.neighbours(self.start.name))]

        while stack:
            try:
                neighbour = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue

            if neighbour not in self.visited:
                self.visited.add(neighbour)
                yield neighbour
                stack.append(iter(self.structure.neighbours(neighbour.name)))


class IterativeDFSIterator(GraphIterator):
    """
    Depth-first traversal driven by an explicit stack.

    All neighbours are pushed in list order, so the last neighbour in the list
    is explored first. The visit order is therefore not the recursive one.
    """

    algorithm = TraversalAlgorithm.DFS_ITERATIVE

    def _traverse(self) -> Iterator[Node]:
        stack = [self.start]

        while stack:
            current = stack.pop()
            if current in self.visited:
                continue

            self.visited.add(current)
            yield current
            stack.extend(self.structure.neighbours(current.name))


class BFSIterator(GraphIterator):
    """Breadth-first traversal driven by a FIFO queue."""

    algorithm = TraversalAlgorithm.BFS_ITERATIVE

    def _traverse(self) -> Iterator[Node]:
        queue = deque([self.start])

        while queue:
            current = queue.popleft()
            if current in self.visited:
                continue

            self.visited.add(current)
            yield current
            queue.extend(self.structure.neighbours(current.name))


ITERATORS: Dict[TraversalAlgorithm, Type[GraphIterator]] = {
    TraversalAlgorithm.DFS_RECURSIVE: RecursiveDFSIterator,
    TraversalAlgorithm.DFS_ITERATIVE: IterativeDFSIterator,
    TraversalAlgorithm.BFS_ITERATIVE: BFSIterator,
}


@dataclass
class TraversalResult:
    """
    Outcome of a traversal.

    Attributes:
        algorithm (TraversalAlgorithm): Strategy that was run
        start (str): Name of the start node
        visited (List[str]): Visited node names in visit order
        metrics (Optional[TraversalMetrics]): Timing and memory figures
    """

    algorithm: TraversalAlgorithm
    start: str
    visited: List[str] = field(default_factory=list)
    metrics: Optional[TraversalMetrics] = None

    def __len__(self) -> int:
        return len(self.visited)


def iterate(
    structure: AdjacencyStructure,
    start_name: str,
    algorithm: Union[TraversalAlgorithm, str],
) -> GraphIterator:
    """
    Get an iterator for traversing a structure.

    Args:
        structure: Structure to traverse
        start_name: Name of the starting node
        algorithm: Traversal strategy, as enum member or string value

    Returns:
        Iterator instance for the strategy

    Raises:
        ValueError: If the algorithm is not recognized
        NodeNotFoundError: If the start node does not exist
    """
    algorithm = TraversalAlgorithm.coerce(algorithm)
    return ITERATORS[algorithm](structure, start_name)


def run_traversal(
    structure: AdjacencyStructure,
    start_name: str,
    algorithm: Union[TraversalAlgorithm, str],
    sink: Optional[VisitSink] = None,
) -> TraversalResult:
    """
    Traverse a structure and emit one visit event per reached node.

    Args:
        structure: Structure to traverse
        start_name: Name of the starting node
        algorithm: Traversal strategy, as enum member or string value
        sink: Receiver of visit events; standard output when omitted

    Returns:
        TraversalResult with the visit order and metrics

    Raises:
        ValueError: If the algorithm is not recognized
        NodeNotFoundError: If the start node does not exist
    """
    iterator = iterate(structure, start_name, algorithm)
    sink = sink if sink is not None else StreamVisitSink()

    logger.debug(f"Starting {iterator.algorithm.value} traversal from '{start_name}'")
    result = TraversalResult(algorithm=iterator.algorithm, start=start_name)
    metrics = TraversalMetrics(operation=iterator.algorithm.value, start_time=perf_counter())

    for position, node in enumerate(iterator):
        sink.on_visit(VisitEvent(node=node, algorithm=iterator.algorithm, position=position))
        result.visited.append(node.name)

    metrics.finish(nodes_visited=len(result.visited))
    result.metrics = metrics
    logger.debug(
        f"{iterator.algorithm.value} from '{start_name}' visited {metrics.nodes_visited} "
        f"nodes in {metrics.duration_ms:.3f}ms (rss {metrics.memory_used} bytes)"
    )
    return result
