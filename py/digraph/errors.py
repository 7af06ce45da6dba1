"""Exceptions raised by the graph engine."""
from typing import Any


class GraphError(Exception):
    """Base class for every error the engine raises."""
    kind = "graph_error"

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": str(self)}


class InvalidVertex(GraphError, KeyError):
    """An operation referenced a vertex that is not in the graph."""
    kind = "invalid_vertex"

    def __init__(self, vertex: Any, operation: str = ""):
        self.vertex = vertex
        self.operation = operation
        prefix = f"{operation}(): " if operation else ""
        super().__init__(f"{prefix}vertex {vertex!r} not in graph")

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message
        return self.args[0]


class SelfLoopRejected(GraphError, ValueError):
    """add_edge was asked to connect a vertex to itself."""
    kind = "self_loop"

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"add_edge(): self-edge on {vertex!r} not allowed")


class CycleDetected(GraphError):
    """A cycle-checking depth-first scan found a back edge."""
    kind = "cycle_detected"

    def __init__(self, source: Any, target: Any, operation: str = "dfs_visit"):
        self.source = source
        self.target = target
        super().__init__(
            f"{operation}(): cycle involving vertices {source!r} and {target!r}"
        )


class Disconnected(GraphError):
    """The minimum spanning tree could not reach every vertex."""
    kind = "disconnected"

    def __init__(self, spanned: int, total: int):
        self.spanned = spanned
        self.total = total
        super().__init__(
            f"min_span_tree(): graph is not connected ({spanned} of {total} vertices spanned)"
        )


class EmptyGraph(GraphError):
    """An algorithm that needs at least one vertex got an empty graph."""
    kind = "empty_graph"


class GraphFormatError(GraphError, ValueError):
    """Text input does not follow the graph file format."""
    kind = "bad_format"


class UnknownCommand(GraphError, KeyError):
    """No command is registered under the requested name."""
    kind = "unknown_command"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown command: {name}")

    def __str__(self) -> str:
        return self.args[0]
