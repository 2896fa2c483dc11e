"""
Graph file loader.

The graph file format is line oriented UTF-8 text:

    A, B, C
    A, B, 1
    B, C, -2

The first line lists the node names, every following line one undirected edge
as ``first, second, weight``. Fields are separated by commas and trimmed;
weights are signed decimal integers that fit 32 bits. Comments and blank
edge lines are not supported.
"""

import logging
import re
from typing import List, Sequence, Union

from ..enums import GraphType
from ..exceptions import (
    EmptyFileError,
    GraphIOError,
    InvalidFileFormatError,
    NodeNotFoundError,
)
from ..structures import WEIGHT_MAX, WEIGHT_MIN, AdjacencyStructure, create_structure

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
EDGE_FIELD_COUNT = 3
WEIGHT_PATTERN = re.compile(r"[+-]?[0-9]+")
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_fields(line: str) -> List[str]:
    """
    Split a line into raw comma separated fields.

    Trailing empty fields are dropped, so ``"A,B,1,"`` has three fields and
    ``",,"`` has none, while an empty line has a single empty field.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) == 1:
        return fields
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_weight(token: str, line_number: int) -> int:
    """
    Parse a trimmed weight token.

    Raises:
        InvalidFileFormatError: If the token is not a 32-bit signed decimal integer
    """
    if WEIGHT_PATTERN.fullmatch(token) is None:
        raise InvalidFileFormatError(f"Invalid weight in line {line_number}.", line_number)
    weight = int(token)
    if not WEIGHT_MIN <= weight <= WEIGHT_MAX:
        raise InvalidFileFormatError(f"Invalid weight in line {line_number}.", line_number)
    return weight


class GraphLoader:
    """
    Build an adjacency structure from graph file lines.

    The loader registers every node of the first line, then adds the edges in
    file order. It performs no deduplication; a repeated edge is passed to the
    structure again and handled the way that representation handles it.
    """

    def __init__(self, structure: AdjacencyStructure):
        """
        Initialize loader.

        Args:
            structure: Empty structure to populate
        """
        self.structure = structure

    def load_lines(self, lines: Sequence[str]) -> AdjacencyStructure:
        """
        Populate the structure from already read lines.

        Args:
            lines: File content split into lines, without line terminators

        Returns:
            The populated structure

        Raises:
            EmptyFileError: If there are no lines
            InvalidFileFormatError: If a line cannot be parsed
            NodeNotFoundError: If an edge references an unknown node
            NodeAlreadyExistsError: If the first line repeats a name
        """
        if not lines:
            raise EmptyFileError()

        self._load_nodes(lines[0])

        edge_count = 0
        for line_number, line in enumerate(lines[1:], start=2):
            self._load_edge(line, line_number)
            edge_count += 1

        logger.debug(f"Loaded {len(self.structure)} nodes and {edge_count} edges")
        return self.structure

    def _load_nodes(self, line: str) -> None:
        if not line.strip():
            logger.debug("First line is empty, graph has no nodes")
            return

        for token in split_fields(line):
            name = token.strip()
            if not name:
                raise InvalidFileFormatError("Invalid format in line 1.", 1)
            self.structure.add_node(name)

    def _load_edge(self, line: str, line_number: int) -> None:
        fields = split_fields(line)
        if len(fields) != EDGE_FIELD_COUNT:
            raise InvalidFileFormatError(f"Invalid format in line {line_number}.", line_number)

        first, second, raw_weight = (token.strip() for token in fields)
        weight = parse_weight(raw_weight, line_number)

        try:
            self.structure.add_edge(first, second, weight)
        except NodeNotFoundError as e:
            raise NodeNotFoundError(e.node_name, line_number=line_number) from e


def read_lines(path: str) -> List[str]:
    """
    Read a UTF-8 text file completely and split it into lines.

    Only CRLF, CR and LF end a line; a final line terminator does not start
    another line.

    Raises:
        GraphIOError: If the file cannot be opened or decoded
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise GraphIOError(str(e), str(path)) from e
    lines = LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def load_structure(
    path: str, graph_type: Union[GraphType, str] = GraphType.ADJACENCY_LIST
) -> AdjacencyStructure:
    """
    Load a graph file into a new structure of the requested representation.

    Args:
        path: Path of the graph file
        graph_type: Representation to build

    Returns:
        Populated structure

    Raises:
        GraphIOError: If the file cannot be read
        EmptyFileError, InvalidFileFormatError, NodeNotFoundError,
        NodeAlreadyExistsError: If the content is invalid
    """
    structure = create_structure(graph_type)
    lines = read_lines(path)
    logger.debug(f"Read {len(lines)} lines from {path}")
    return GraphLoader(structure).load_lines(lines)
