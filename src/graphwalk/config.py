"""Run configuration for the command line interface.

A run configuration names the graph file, the representation to load it into,
the start node and the traversals to perform. It can be given as command line
flags or as JSON, either inline or as a file path prefixed with '@':

    python -m graphwalk cli run --config '{"file_path": "graph.txt", "start_node": "A"}'
    python -m graphwalk cli run --config @runs/triangle.json

JSON input is validated against CONFIG_SCHEMA before it is converted.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.enums import GraphType, TraversalAlgorithm
from .core.exceptions import ConfigurationError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "file_path": {"type": "string", "minLength": 1},
        "graph_type": {"enum": [graph_type.value for graph_type in GraphType]},
        "start_node": {"type": ["string", "null"]},
        "algorithms": {
            "type": "array",
            "items": {"enum": [algorithm.value for algorithm in TraversalAlgorithm]},
        },
        "render": {"type": "boolean"},
        "log_level": {"enum": LOG_LEVELS},
    },
    "required": ["file_path"],
    "additionalProperties": False,
}


def default_algorithms() -> List[TraversalAlgorithm]:
    """All traversal algorithms in their canonical order."""
    return list(TraversalAlgorithm)


@dataclass
class RunConfig:
    """
    Settings for one CLI run.

    Attributes:
        file_path (str): Graph file to load
        graph_type (GraphType): Representation to load the graph into
        start_node (Optional[str]): Start of every traversal; first node when None
        algorithms (List[TraversalAlgorithm]): Traversals to run, in order
        render (bool): Whether to print the structure before traversing
        log_level (str): Name of the logging level for the run
    """

    file_path: str
    graph_type: GraphType = GraphType.ADJACENCY_LIST
    start_node: Optional[str] = None
    algorithms: List[TraversalAlgorithm] = field(default_factory=default_algorithms)
    render: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate and normalise the configuration."""
        if not self.file_path:
            raise ConfigurationError("file_path must be a non-empty string")
        try:
            self.graph_type = GraphType.coerce(self.graph_type)
            self.algorithms = [TraversalAlgorithm.coerce(a) for a in self.algorithms]
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """
        Create a configuration from decoded JSON.

        The log level is matched case-insensitively, like on the command line.

        Raises:
            ConfigurationError: If the data does not match CONFIG_SCHEMA
        """
        if isinstance(data, dict) and isinstance(data.get("log_level"), str):
            data = {**data, "log_level": data["log_level"].upper()}
        try:
            json_validate(instance=data, schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a JSON compatible dictionary."""
        return {
            "file_path": self.file_path,
            "graph_type": self.graph_type.value,
            "start_node": self.start_node,
            "algorithms": [algorithm.value for algorithm in self.algorithms],
            "render": self.render,
            "log_level": self.log_level,
        }


def parse_json_input(json_str: str) -> Dict[str, Any]:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       working directory.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ConfigurationError: If the JSON is invalid or the file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ConfigurationError(f"File not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON input: {e}") from e
