"""Core types for the directed graph engine."""
import enum
import sys
from dataclasses import dataclass, field
from typing import Generic, Hashable, List, TypeVar

V = TypeVar("V", bound=Hashable)

# Data value of a vertex that no algorithm has reached.
INFINITY = sys.maxsize

# Weight reported for an edge that does not exist.
NO_EDGE = -1


class VertexColor(enum.Enum):
    """Visit state of a vertex during a scan."""
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


@dataclass
class Edge:
    """Outgoing edge stored in the source vertex's list.

    Two edges are equal when they point at the same destination slot; the
    weight does not take part in identity.
    """
    dest: int
    weight: int = field(compare=False)


@dataclass
class VertexInfo(Generic[V]):
    """Storage record for one slot of the vertex table."""
    vertex: V
    edges: List[Edge] = field(default_factory=list)
    in_degree: int = 0
    occupied: bool = True

    def reset(self, vertex: V) -> None:
        """Reinitialise a recycled slot for a new vertex."""
        self.vertex = vertex
        self.edges.clear()
        self.in_degree = 0
        self.occupied = True

    def find_edge(self, dest: int):
        """Return the edge to slot dest, or None."""
        for edge in self.edges:
            if edge.dest == dest:
                return edge
        return None
