"""
Visit event system.

Traversals report every first visit of a node as a VisitEvent delivered to a
sink. Sinks are plain objects implementing the VisitSink protocol, which keeps
the traversal engine independent of where the output ends up.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, TextIO

from ..enums import TraversalAlgorithm
from ..models import Node


@dataclass(frozen=True)
class VisitEvent:
    """
    A traversal reached a node for the first time.

    Attributes:
        node (Node): The visited node
        algorithm (TraversalAlgorithm): Traversal that produced the event
        position (int): 0-based position of the visit within the traversal
    """

    node: Node
    algorithm: TraversalAlgorithm
    position: int

    def format(self) -> str:
        """Format the event as the visit line written to text sinks."""
        return f"Visiting: {self.node.name}"


class VisitSink(Protocol):
    """Protocol for objects that receive visit events."""

    def on_visit(self, event: VisitEvent) -> None:
        """
        Called once per visited node, in visit order.

        Args:
            event (VisitEvent): The visit that occurred
        """
        ...


class StreamVisitSink:
    """
    Write one ``Visiting: <name>`` line per event to a text stream.

    The stream defaults to the current ``sys.stdout`` at the time of each
    event, so redirections installed after construction are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def on_visit(self, event: VisitEvent) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(event.format() + "\n")


@dataclass
class CollectingVisitSink:
    """
    Keep every received event in memory.

    Attributes:
        events (List[VisitEvent]): Received events in order
    """

    events: List[VisitEvent] = field(default_factory=list)

    def on_visit(self, event: VisitEvent) -> None:
        self.events.append(event)

    @property
    def names(self) -> List[str]:
        """Names of the visited nodes in visit order."""
        return [event.node.name for event in self.events]

    def clear(self) -> None:
        """Forget all received events."""
        self.events.clear()
