"""Entry point for ``python -m graphwalk``.

The first argument names the interface to start; the remaining arguments are
passed to it unchanged:

    python -m graphwalk cli run graph.txt --start A
"""

import sys
from typing import Callable, Dict, List, Optional

from . import cli

COMMANDS: Dict[str, Callable[[Optional[List[str]]], int]] = {
    "cli": cli.main,
}


def usage() -> str:
    """Usage text listing the available interfaces."""
    return "Usage: python -m graphwalk <command> [args...]\n\nAvailable commands: " + ", ".join(
        sorted(COMMANDS)
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Dispatch to the interface named by the first argument.

    Args:
        argv (Optional[List[str]]): Arguments without the program name;
            sys.argv[1:] when None.

    Returns:
        int: Exit status of the interface, 1 for a missing or unknown command.
    """
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(usage())
        return 1

    command, args = argv[0], argv[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print(usage())
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
