"""
Tests for the Graph facade.
"""

import pytest

import graphwalk
from graphwalk.core.enums import GraphType
from graphwalk.core.exceptions import (
    InvalidWeightError,
    NodeAlreadyExistsError,
    NodeNotFoundError,
)
from graphwalk.core.graph import Graph
from graphwalk.core.structures import AdjacencyList, AdjacencyMatrix, ObjectGraph


def test_graph_creation_default_type():
    """Test that graphs default to the adjacency list."""
    graph = Graph()

    assert graph.graph_type is GraphType.ADJACENCY_LIST
    assert isinstance(graph.structure, AdjacencyList)
    assert len(graph) == 0


@pytest.mark.parametrize(
    "graph_type, structure_type",
    [
        (GraphType.ADJACENCY_LIST, AdjacencyList),
        (GraphType.ADJACENCY_MATRIX, AdjacencyMatrix),
        (GraphType.OBJECT_GRAPH, ObjectGraph),
    ],
)
def test_graph_structure_matches_type(graph_type, structure_type):
    """Test that each graph type is backed by its structure."""
    assert isinstance(Graph(graph_type).structure, structure_type)


def test_graph_rejects_mismatched_structure():
    """Test wrapping a structure of the wrong representation."""
    with pytest.raises(ValueError):
        Graph(GraphType.ADJACENCY_MATRIX, structure=AdjacencyList())


def test_graph_manual_construction(graph_type):
    """Test building a graph through the facade."""
    graph = Graph(graph_type)
    graph.add_node("A")
    graph.add_node("B")
    graph.add_edge("A", "B", 3)

    assert graph.get_node("A").name == "A"
    assert [n.name for n in graph.neighbours("B")] == ["A"]
    assert [(n.node.name, n.weight) for n in graph.weighted_neighbours("A")] == [("B", 3)]
    assert "A" in graph
    assert "Z" not in graph
    assert graph.has_node("B")


def test_graph_operation_errors(graph_type):
    """Test error propagation through the facade."""
    graph = Graph(graph_type)
    graph.add_node("A")

    with pytest.raises(NodeAlreadyExistsError):
        graph.add_node("A")
    with pytest.raises(NodeNotFoundError):
        graph.get_node("B")
    with pytest.raises(NodeNotFoundError):
        graph.add_edge("A", "B", 1)
    with pytest.raises(NodeNotFoundError):
        graph.neighbours("B")


def test_graph_render_and_str(triangle):
    """Test that the graph renders its structure."""
    rendered = triangle.render()

    assert rendered == str(triangle)
    assert rendered.splitlines()[0] == f"{triangle.structure.title}:"


def test_package_exports(write_graph_file):
    """Test the top level convenience API."""
    path = write_graph_file("A,B\nA,B,1\n")

    graph = graphwalk.load(path, "object-graph")

    assert isinstance(graph, graphwalk.Graph)
    assert graph.get_node("A") == graphwalk.Node("A")
    assert graphwalk.__version__ == "0.1.0"


@pytest.mark.parametrize("weight", [2**63, 1.7])
def test_graph_add_edge_rejects_invalid_weight(graph_type, weight):
    """Test that every representation rejects the same weights through the facade."""
    graph = Graph(graph_type)
    graph.add_node("A")
    graph.add_node("B")

    with pytest.raises(InvalidWeightError):
        graph.add_edge("A", "B", weight)

    assert graph.weighted_neighbours("A") == []


def test_graph_package_exports_facade_only():
    """Test that the graph package exports graph types, not library errors."""
    from graphwalk.core import graph as graph_package

    assert "Graph" in graph_package.__all__
    assert "NodeNotFoundError" not in graph_package.__all__
    assert not hasattr(graph_package, "NodeNotFoundError")
