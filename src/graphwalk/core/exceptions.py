"""
Custom exceptions for the graph library.

This module defines the hierarchy of exceptions raised while loading, building
and traversing graphs. Every exception derives from GraphError so callers can
handle all library failures in a single clause, while the CLI distinguishes
I/O failures (GraphIOError) from everything else.
"""

from typing import Optional


class GraphError(Exception):
    """
    Base class for all graph library errors.

    Callers that only need to know that an operation failed can catch this
    type; the subclasses carry the details of each failure kind.
    """


class EmptyFileError(GraphError):
    """
    Raised when a graph file contains no lines at all.

    A file holding a single empty line is not empty: it describes a graph
    without nodes.
    """

    def __init__(self, message: str = "File is empty."):
        super().__init__(message)


class InvalidFileFormatError(GraphError):
    """
    Raised when a line of a graph file cannot be parsed.

    Examples:
        * An edge line without exactly three comma separated fields
        * A weight that is not a signed decimal integer
        * An empty node name on the first line

    Attributes:
        line_number (int): 1-based number of the offending line
    """

    def __init__(self, message: str, line_number: int):
        super().__init__(message)
        self.line_number = line_number


class NodeNotFoundError(GraphError):
    """
    Raised when an operation references a node that was never registered.

    During loading the error is re-raised with the number of the edge line
    that referenced the unknown node.

    Attributes:
        node_name (str): Name that could not be resolved
        line_number (Optional[int]): 1-based line number when raised by the loader
    """

    def __init__(self, node_name: str, line_number: Optional[int] = None):
        message = f"Node '{node_name}' not found."
        if line_number is not None:
            message = f"Node not found in line {line_number}: {message}"
        super().__init__(message)
        self.node_name = node_name
        self.line_number = line_number


class NodeAlreadyExistsError(GraphError):
    """
    Raised when a node name is registered twice.

    Attributes:
        node_name (str): The duplicated name
    """

    def __init__(self, node_name: str):
        super().__init__(f"Node '{node_name}' already exists.")
        self.node_name = node_name


class GraphIOError(GraphError):
    """
    Raised when the graph file cannot be read.

    Wraps the underlying OSError or UnicodeDecodeError, which stays available
    as ``__cause__``.

    Attributes:
        path (str): Path of the file that failed to load
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ConfigurationError(GraphError):
    """
    Raised when a run configuration is invalid.

    Examples:
        * Unknown graph type or traversal algorithm
        * Configuration JSON that does not match the schema
        * Missing configuration file
    """


class InvalidWeightError(GraphError):
    """
    Raised when an edge weight passed to a structure is not accepted.

    Weights must be integers in the signed 32-bit range in every
    representation. The loader reports bad weights in a file as
    InvalidFileFormatError instead, citing the line.

    Attributes:
        weight: The rejected value
    """

    def __init__(self, weight):
        super().__init__(f"Invalid weight: {weight!r}.")
        self.weight = weight
