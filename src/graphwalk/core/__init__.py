"""Core graph functionality."""

from .enums import GraphType, TraversalAlgorithm
from .exceptions import (
    ConfigurationError,
    EmptyFileError,
    GraphError,
    GraphIOError,
    InvalidFileFormatError,
    InvalidWeightError,
    NodeAlreadyExistsError,
    NodeNotFoundError,
)
from .models import Neighbour, Node
from .structures import AdjacencyList, AdjacencyMatrix, AdjacencyStructure, ObjectGraph
from .graph import (
    CollectingVisitSink,
    Graph,
    StreamVisitSink,
    TraversalResult,
    VisitEvent,
    VisitSink,
    load,
)

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "AdjacencyStructure",
    "CollectingVisitSink",
    "ConfigurationError",
    "EmptyFileError",
    "Graph",
    "GraphError",
    "GraphIOError",
    "GraphType",
    "InvalidFileFormatError",
    "InvalidWeightError",
    "Neighbour",
    "Node",
    "NodeAlreadyExistsError",
    "NodeNotFoundError",
    "ObjectGraph",
    "StreamVisitSink",
    "TraversalAlgorithm",
    "TraversalResult",
    "VisitEvent",
    "VisitSink",
    "load",
]
