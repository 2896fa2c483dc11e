"""
Traversal performance metrics.

Collected for every traversal and logged at debug level. Memory figures are
the resident set size of the current process as reported by psutil.
"""

import os
from dataclasses import dataclass
from time import perf_counter
from typing import Optional

import psutil


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return int(process.memory_info().rss)


@dataclass
class TraversalMetrics:
    """
    Container for traversal performance metrics.

    Attributes:
        operation: Name of the traversal algorithm
        start_time: perf_counter value when the traversal started
        end_time: perf_counter value when it finished (0.0 while running)
        nodes_visited: Number of visit events emitted
        memory_used: Resident memory of the process at the end (bytes)

    Example:
        >>> metrics = TraversalMetrics(operation="bfs-iterative", start_time=perf_counter())
        >>> # ... traverse ...
        >>> metrics.finish(nodes_visited=4)
        >>> print(f"Traversal took {metrics.duration_ms:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_visited: int = 0
    memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    def finish(self, nodes_visited: int, end_time: Optional[float] = None) -> None:
        """Record the end of the traversal."""
        self.end_time = perf_counter() if end_time is None else end_time
        self.nodes_visited = nodes_visited
        self.memory_used = get_memory_usage()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, 0.0 while the traversal is running."""
        if not self.end_time:
            return 0.0
        return (self.end_time - self.start_time) * 1000
