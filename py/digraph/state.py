"""Per-vertex scratch fields shared by the graph algorithms.

Algorithms record visit colors, parents and a numeric data value (distance or
edge weight) for every vertex. The values are kept apart from the topology,
keyed by slot, so a graph can hand out one state per algorithm run. Parents are
stored as vertex keys. Every live state registers with its graph, which tells
it when a slot is recycled. Each ``DiGraph`` owns a default state reachable
through its scratch accessors.
"""
from typing import Any, Dict, Optional

from .types import INFINITY, VertexColor


class ScratchState:
    """Color, parent and data values for the vertices of one graph."""

    def __init__(self, graph):
        self.graph = graph
        self._color: Dict[int, VertexColor] = {}
        self._parent: Dict[int, Any] = {}
        self._data: Dict[int, int] = {}
        graph._states.add(self)

    def color_white(self) -> None:
        """Color every vertex WHITE."""
        for slot in self.graph._occupied_slots():
            self._color[slot] = VertexColor.WHITE

    def init_data(self) -> None:
        """Set the data value of every vertex to INFINITY."""
        for slot in self.graph._occupied_slots():
            self._data[slot] = INFINITY

    def forget(self, slot: int) -> None:
        """Drop whatever is stored for a slot that is being recycled."""
        self._color.pop(slot, None)
        self._parent.pop(slot, None)
        self._data.pop(slot, None)

    def clear(self) -> None:
        self._color.clear()
        self._parent.clear()
        self._data.clear()

    def get_color(self, v) -> VertexColor:
        slot = self.graph._slot_of(v, "get_color")
        return self._color.get(slot, VertexColor.WHITE)

    def set_color(self, v, color: VertexColor) -> VertexColor:
        """Assign a color to v and return the previous one."""
        slot = self.graph._slot_of(v, "set_color")
        old = self._color.get(slot, VertexColor.WHITE)
        self._color[slot] = color
        return old

    def get_parent(self, v):
        """Return the parent recorded for v, or None."""
        slot = self.graph._slot_of(v, "get_parent")
        return self._parent.get(slot)

    def set_parent(self, v, p):
        """Record p as the parent of v and return the previous parent.

        The parent is kept as a key, so it still names p after p is removed.
        """
        slot = self.graph._slot_of(v, "set_parent")
        self.graph._slot_of(p, "set_parent")
        old = self._parent.get(slot)
        self._parent[slot] = p
        return old

    def get_data(self, v) -> int:
        slot = self.graph._slot_of(v, "get_data")
        return self._data.get(slot, INFINITY)

    def set_data(self, v, value: int) -> int:
        """Assign the data value of v and return the previous one."""
        slot = self.graph._slot_of(v, "set_data")
        old = self._data.get(slot, INFINITY)
        self._data[slot] = value
        return old


def state_for(graph, state: Optional[ScratchState] = None) -> ScratchState:
    """Pick the scratch state an algorithm run should use."""
    if state is None:
        return graph.scratch
    if state.graph is not graph:
        raise ValueError("scratch state belongs to a different graph")
    return state
