"""Tests for graph traversal operations."""

import sys
from collections import deque
from typing import Dict

import pytest

from graphwalk.core.enums import GraphType, TraversalAlgorithm
from graphwalk.core.exceptions import NodeNotFoundError
from graphwalk.core.graph import (
    BFSIterator,
    CollectingVisitSink,
    Graph,
    IterativeDFSIterator,
    RecursiveDFSIterator,
)


def distances(graph: Graph, start: str) -> Dict[str, int]:
    """Hop distances from start, computed independently of the engine."""
    result = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in graph.neighbours(current):
            if neighbour.name not in result:
                result[neighbour.name] = result[current] + 1
                queue.append(neighbour.name)
    return result


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (TraversalAlgorithm.DFS_RECURSIVE, ["A", "B", "C"]),
        (TraversalAlgorithm.DFS_ITERATIVE, ["A", "C", "B"]),
        (TraversalAlgorithm.BFS_ITERATIVE, ["A", "B", "C"]),
    ],
)
def test_triangle_traversals(triangle, sink, algorithm, expected):
    """Test the triangle visit orders in every representation."""
    result = triangle.traverse("A", algorithm, sink=sink)

    assert sink.names == expected
    assert result.visited == expected
    assert result.algorithm is algorithm
    assert result.start == "A"


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_chain_traversals(graph_type, sink, algorithm):
    """Test that every traversal walks a chain in order."""
    graph = Graph.from_lines(["A,B,C,D", "A,B,1", "B,C,1", "C,D,1"], graph_type)

    graph.traverse("A", algorithm, sink=sink)

    assert sink.names == ["A", "B", "C", "D"]


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_disconnected_graph_visits_component_only(graph_type, sink, algorithm):
    """Test that traversal stays inside the start component."""
    graph = Graph.from_lines(["A,B,C,D", "A,B,1", "C,D,1"], graph_type)

    result = graph.traverse("A", algorithm, sink=sink)

    assert len(result) == 2
    assert sorted(sink.names) == ["A", "B"]


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_unknown_start_fails(triangle, sink, algorithm):
    """Test that an unknown start node fails before any event."""
    with pytest.raises(NodeNotFoundError):
        triangle.traverse("Z", algorithm, sink=sink)

    assert sink.events == []


def test_unknown_algorithm_fails(triangle, sink):
    """Test that an unknown algorithm name is rejected."""
    with pytest.raises(ValueError):
        triangle.traverse("A", "dijkstra", sink=sink)


def test_algorithm_accepts_string_value(triangle, sink):
    """Test naming an algorithm by its string value."""
    triangle.traverse("A", "dfs-iterative", sink=sink)

    assert sink.names == ["A", "C", "B"]


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_isolated_start_visits_itself(graph_type, sink, algorithm):
    """Test traversal from a node without edges."""
    graph = Graph.from_lines(["A,B", "B,B,1"], graph_type)

    graph.traverse("A", algorithm, sink=sink)

    assert sink.names == ["A"]


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_self_loops_and_duplicates_visit_once(graph_type, sink, algorithm):
    """Test that loops and repeated edges do not cause repeated visits."""
    graph = Graph.from_lines(
        ["A,B,C", "A,A,1", "A,B,1", "B,A,2", "B,C,1", "C,C,0", "C,A,5"], graph_type
    )

    graph.traverse("A", algorithm, sink=sink)

    assert sorted(sink.names) == ["A", "B", "C"]


LARGER = [
    "A,B,C,D,E,F,G,H",
    "A,E,1",
    "A,B,1",
    "B,F,1",
    "E,F,1",
    "B,C,1",
    "C,D,1",
    "F,G,1",
    "G,D,1",
    "G,H,1",
]


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
@pytest.mark.parametrize("start", list("ADH"))
def test_every_reachable_node_visited_once(graph_type, algorithm, start):
    """Test that each traversal emits each reachable name exactly once."""
    graph = Graph.from_lines(LARGER, graph_type)
    sink = CollectingVisitSink()

    graph.traverse(start, algorithm, sink=sink)

    assert len(sink.names) == len(set(sink.names))
    assert set(sink.names) == set(distances(graph, start))
    assert sink.names[0] == start


@pytest.mark.parametrize("start", list("ACH"))
def test_bfs_visits_by_increasing_distance(graph_type, sink, start):
    """Test the BFS layer property."""
    graph = Graph.from_lines(LARGER, graph_type)
    hops = distances(graph, start)

    graph.traverse(start, TraversalAlgorithm.BFS_ITERATIVE, sink=sink)

    visited_distances = [hops[name] for name in sink.names]
    assert visited_distances == sorted(visited_distances)


@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm))
def test_long_chain_is_walked_completely(graph_type, sink, algorithm):
    """Test a path far longer than the interpreter recursion limit."""
    length = 3 * sys.getrecursionlimit()
    lines = [",".join(f"N{i}" for i in range(length))]
    lines.extend(f"N{i},N{i + 1},1" for i in range(length - 1))
    graph = Graph.from_lines(lines, graph_type)

    result = graph.traverse("N0", algorithm, sink=sink)

    assert len(result) == length
    assert sink.names == [f"N{i}" for i in range(length)]


def test_recursive_dfs_backtracks_in_list_order(sink):
    """Test that the recursive order resumes each node where it left off."""
    graph = Graph.from_lines(
        ["A,B,C,D,E", "A,B,1", "B,C,1", "B,D,1", "A,E,1", "C,D,1"], GraphType.ADJACENCY_LIST
    )

    graph.traverse("A", TraversalAlgorithm.DFS_RECURSIVE, sink=sink)

    assert sink.names == ["A", "B", "C", "D", "E"]


def test_larger_graph_orders_for_adjacency_list(sink):
    """Test exact orders where stack and recursion disagree."""
    graph = Graph.from_lines(LARGER, GraphType.ADJACENCY_LIST)

    assert [n.name for n in graph.iterator("A", "dfs-recursive")] == list("AEFBCDGH")
    assert [n.name for n in graph.iterator("A", "dfs-iterative")] == list("ABCDGHFE")
    assert [n.name for n in graph.iterator("A", "bfs-iterative")] == list("AEBFCGDH")


def test_larger_graph_orders_for_adjacency_matrix():
    """Test exact orders driven by ascending node index."""
    graph = Graph.from_lines(LARGER, GraphType.ADJACENCY_MATRIX)

    assert [n.name for n in graph.iterator("A", "dfs-recursive")] == list("ABCDGFEH")
    assert [n.name for n in graph.iterator("A", "bfs-iterative")] == list("ABECFDGH")


def test_iterator_classes(triangle):
    """Test that the iterator factory picks the strategy class."""
    assert isinstance(triangle.iterator("A", "dfs-recursive"), RecursiveDFSIterator)
    assert isinstance(triangle.iterator("A", "dfs-iterative"), IterativeDFSIterator)
    assert isinstance(triangle.iterator("A", "bfs-iterative"), BFSIterator)


def test_iterator_can_be_reused(triangle):
    """Test that iterating twice restarts the traversal."""
    iterator = triangle.iterator("A", TraversalAlgorithm.BFS_ITERATIVE)

    assert [n.name for n in iterator] == ["A", "B", "C"]
    assert [n.name for n in iterator] == ["A", "B", "C"]


def test_traversal_does_not_modify_graph(triangle, sink):
    """Test that traversals are read only."""
    before = triangle.render()

    for algorithm in TraversalAlgorithm:
        triangle.traverse("B", algorithm, sink=sink)

    assert triangle.render() == before


def test_traversal_result_metrics(triangle, sink):
    """Test that traversal results carry metrics."""
    result = triangle.traverse("A", TraversalAlgorithm.BFS_ITERATIVE, sink=sink)

    assert result.metrics is not None
    assert result.metrics.operation == "bfs-iterative"
    assert result.metrics.nodes_visited == 3
    assert result.metrics.duration_ms >= 0.0
    assert result.metrics.memory_used > 0


def test_traverse_defaults_to_stdout(triangle, capsys):
    """Test that visit lines go to standard output without a sink."""
    triangle.traverse("A", TraversalAlgorithm.DFS_ITERATIVE)

    captured = capsys.readouterr()
    assert captured.out == "Visiting: A\nVisiting: C\nVisiting: B\n"
