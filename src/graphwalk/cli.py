"""Command Line Interface for the graphwalk library.

This module provides a CLI for loading graph files, printing their adjacency
structure and running traversals over them.

The CLI supports the following commands:
    - run: Load a graph, print it and run traversals from a start node
    - show: Print the adjacency structure of a graph file
    - neighbours: List the weighted neighbours of one node

A run can also be described by a JSON configuration given as a direct string
or as a file path prefixed with '@' (see graphwalk.config).

Example Usage:
    python -m graphwalk cli run files/example.txt --type adjacency-matrix --start A
    python -m graphwalk cli run --config @runs/example.json
    python -m graphwalk cli show files/example.txt --type object-graph
    python -m graphwalk cli neighbours files/example.txt B

Failures reading the file are reported as ``Error while reading file: <message>``
and every other library failure as ``Error: <message>``, both on stderr with
exit status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, RunConfig, parse_json_input
from .core.enums import GraphType, TraversalAlgorithm
from .core.exceptions import ConfigurationError, GraphError, GraphIOError
from .core.graph import Graph

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build the run configuration from parsed arguments.

    Args:
        args (argparse.Namespace): Parsed arguments of the run command.

    Returns:
        RunConfig: Configuration for the run.

    Raises:
        ConfigurationError: If the arguments or the JSON configuration are invalid.
    """
    if args.config:
        if args.file:
            raise ConfigurationError("Give either a graph file or --config, not both")
        data = parse_json_input(args.config)
        if isinstance(data, dict):
            data.setdefault("log_level", args.log_level)
        return RunConfig.from_dict(data)

    if not args.file:
        raise ConfigurationError("A graph file or --config is required")

    return RunConfig(
        file_path=args.file,
        graph_type=args.type,
        start_node=args.start,
        algorithms=args.algorithm or list(TraversalAlgorithm),
        render=not args.no_render,
        log_level=args.log_level,
    )


def run(config: RunConfig) -> None:
    """Load the configured graph, print it and run the configured traversals.

    Args:
        config (RunConfig): Configuration of the run.

    Raises:
        GraphError: If loading or traversing fails.
    """
    graph = Graph.load(config.file_path, config.graph_type)

    if config.render:
        print(graph.render())

    start = config.start_node
    if start is None:
        nodes = graph.nodes()
        if not nodes:
            logger.warning(f"{config.file_path} has no nodes, skipping traversals")
            return
        start = nodes[0].name

    for algorithm in config.algorithms:
        print(f"\n{algorithm.value} from {start}:")
        graph.traverse(start, algorithm)


def show(file_path: str, graph_type: GraphType) -> None:
    """Print the adjacency structure of a graph file."""
    print(Graph.load(file_path, graph_type).render())


def list_neighbours(file_path: str, graph_type: GraphType, node_name: str) -> None:
    """Print the weighted neighbours of a node, one per line."""
    graph = Graph.load(file_path, graph_type)
    for neighbour in graph.weighted_neighbours(node_name):
        print(f"- {neighbour}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Graph traversal CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    type_options = argparse.ArgumentParser(add_help=False)
    type_options.add_argument(
        "--type",
        default=GraphType.ADJACENCY_LIST,
        type=GraphType,
        choices=list(GraphType),
        metavar="{" + ",".join(t.value for t in GraphType) + "}",
        help="Adjacency representation (default: adjacency-list)",
    )

    run_parser = subparsers.add_parser(
        "run", parents=[type_options], help="Load a graph, print it and traverse it"
    )
    run_parser.add_argument("file", nargs="?", help="Graph file")
    run_parser.add_argument("--start", help="Start node (default: first node of the file)")
    run_parser.add_argument(
        "--algorithm",
        action="append",
        type=TraversalAlgorithm,
        choices=list(TraversalAlgorithm),
        metavar="{" + ",".join(a.value for a in TraversalAlgorithm) + "}",
        help="Traversal to run; repeat for several (default: all)",
    )
    run_parser.add_argument(
        "--no-render", action="store_true", help="Do not print the adjacency structure"
    )
    run_parser.add_argument("--config", help="JSON string or @filename with the run configuration")

    show_parser = subparsers.add_parser(
        "show", parents=[type_options], help="Print the adjacency structure"
    )
    show_parser.add_argument("file", help="Graph file")

    neighbours_parser = subparsers.add_parser(
        "neighbours", parents=[type_options], help="List the neighbours of a node"
    )
    neighbours_parser.add_argument("file", help="Graph file")
    neighbours_parser.add_argument("node", help="Node name")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv (Optional[List[str]]): Arguments without the program name;
            sys.argv[1:] when None.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "run":
            config = config_from_args(args)
            setup_logging(config.log_level)
            run(config)
        elif args.command == "show":
            setup_logging(args.log_level)
            show(args.file, args.type)
        elif args.command == "neighbours":
            setup_logging(args.log_level)
            list_neighbours(args.file, args.type, args.node)
    except GraphIOError as e:
        print(f"Error while reading file: {e}", file=sys.stderr)
        return 1
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
