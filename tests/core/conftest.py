"""Shared test fixtures."""

from pathlib import Path
from typing import Callable, List

import pytest

from graphwalk.core.enums import GraphType
from graphwalk.core.graph import CollectingVisitSink, Graph

TRIANGLE = ["A,B,C", "A,B,1", "B,C,2", "A,C,3"]


@pytest.fixture(params=list(GraphType), ids=lambda graph_type: graph_type.value)
def graph_type(request) -> GraphType:
    """Fixture running a test once per adjacency representation."""
    return request.param


@pytest.fixture
def write_graph_file(tmp_path: Path) -> Callable[[str], str]:
    """Fixture returning a helper that writes raw file content and returns its path."""

    def write(content: str, name: str = "graph.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def triangle_lines() -> List[str]:
    """Fixture providing the triangle graph file lines."""
    return list(TRIANGLE)


@pytest.fixture
def triangle(graph_type) -> Graph:
    """Fixture providing the triangle graph in each representation."""
    return Graph.from_lines(TRIANGLE, graph_type)


@pytest.fixture
def sink() -> CollectingVisitSink:
    """Fixture providing a sink that records visit events."""
    return CollectingVisitSink()
