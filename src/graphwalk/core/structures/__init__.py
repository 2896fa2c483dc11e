"""
Adjacency structures.

Three interchangeable representations of the same undirected weighted graph.
Use create_structure to obtain the implementation for a GraphType.
"""

import logging
from typing import Dict, Type, Union

from ..enums import GraphType
from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .base import WEIGHT_MAX, WEIGHT_MIN, AdjacencyStructure, check_weight
from .object_graph import ArenaEdge, ObjectGraph, ObjectNode

logger = logging.getLogger(__name__)

STRUCTURES: Dict[GraphType, Type[AdjacencyStructure]] = {
    GraphType.ADJACENCY_LIST: AdjacencyList,
    GraphType.ADJACENCY_MATRIX: AdjacencyMatrix,
    GraphType.OBJECT_GRAPH: ObjectGraph,
}


def create_structure(graph_type: Union[GraphType, str]) -> AdjacencyStructure:
    """
    Create an empty adjacency structure.

    Args:
        graph_type: Representation to use, as enum member or string value

    Returns:
        AdjacencyStructure: New empty structure

    Raises:
        ValueError: If graph_type is not a known representation
    """
    graph_type = GraphType.coerce(graph_type)
    logger.debug(f"Creating {graph_type.value} structure")
    return STRUCTURES[graph_type]()


__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "AdjacencyStructure",
    "ArenaEdge",
    "ObjectGraph",
    "ObjectNode",
    "STRUCTURES",
    "WEIGHT_MAX",
    "WEIGHT_MIN",
    "check_weight",
    "create_structure",
]
