"""Directed weighted graph with slot-based vertex storage."""
import logging
import weakref
from collections.abc import Set as AbstractSet
from typing import Dict, Generic, Iterator, List, Optional, Set, Tuple

from .errors import InvalidVertex, SelfLoopRejected
from .state import ScratchState
from .types import NO_EDGE, V, Edge, VertexColor, VertexInfo

logger = logging.getLogger(__name__)


class DiGraph(Generic[V]):
    """Directed graph with integer edge weights.

    Every vertex key maps to a slot in the vertex table. A slot freed by
    remove_vertex goes onto an availability stack and is handed to the next
    new vertex before the table grows. Each slot keeps its outgoing edges in
    insertion order together with the vertex's in-degree.

    The graph also carries scratch fields (color, parent, data) that the
    algorithm functions read and overwrite. They are not reset automatically;
    call color_white() or init_data() before relying on them. Algorithms and
    mutations must not run concurrently on the same graph.
    """

    def __init__(self):
        self._vtx_map: Dict[V, int] = {}
        self._vinfo: List[VertexInfo[V]] = []
        self._avail: List[int] = []
        self._num_edges = 0
        # bumped whenever the vertex table changes; checked by vertex-set iterators
        self._mod_count = 0
        # every live ScratchState, so recycled slots can be cleared in all of them
        self._states: "weakref.WeakSet[ScratchState]" = weakref.WeakSet()
        self.scratch = ScratchState(self)

    # ------------------------------------------------------------------
    # Slot helpers
    # ------------------------------------------------------------------

    def _slot_of(self, v, operation: str) -> int:
        """Return the slot of v or raise InvalidVertex."""
        try:
            return self._vtx_map[v]
        except KeyError:
            raise InvalidVertex(v, operation) from None
        except TypeError:
            # unhashable keys can never be vertices
            raise InvalidVertex(v, operation) from None

    def _occupied_slots(self) -> Iterator[int]:
        for slot, info in enumerate(self._vinfo):
            if info.occupied:
                yield slot

    def _remove_fixup(self, index: int) -> None:
        """Detach every edge touching slot index and recycle the slot."""
        info = self._vinfo[index]
        removed = 0

        # edges that terminate at the removed vertex
        for slot in self._occupied_slots():
            if slot == index:
                continue
            edges = self._vinfo[slot].edges
            for pos, edge in enumerate(edges):
                if edge.dest == index:
                    del edges[pos]
                    self._num_edges -= 1
                    removed += 1
                    break

        # edges that start at the removed vertex
        for edge in info.edges:
            self._vinfo[edge.dest].in_degree -= 1
        self._num_edges -= len(info.edges)
        removed += len(info.edges)
        info.edges.clear()

        info.in_degree = 0
        info.occupied = False
        for state in self._states:
            state.forget(index)
        self._avail.append(index)
        self._mod_count += 1
        logger.debug("Freed slot %d for %r, dropped %d edges", index, info.vertex, removed)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def number_of_vertices(self) -> int:
        return len(self._vtx_map)

    def number_of_edges(self) -> int:
        return self._num_edges

    def is_empty(self) -> bool:
        return not self._vtx_map

    def contains_vertex(self, v) -> bool:
        try:
            return v in self._vtx_map
        except TypeError:
            return False

    def add_vertex(self, v: V) -> bool:
        """Add v to the graph.

        Returns:
            True if v was added, False if it was already a vertex
        """
        if v in self._vtx_map:
            return False

        if self._avail:
            index = self._avail.pop()
            self._vinfo[index].reset(v)
            logger.debug("Reusing slot %d for %r", index, v)
        else:
            index = len(self._vinfo)
            self._vinfo.append(VertexInfo(v))

        self._vtx_map[v] = index
        self._mod_count += 1
        return True

    def remove_vertex(self, v) -> bool:
        """Remove v and every edge that starts or ends at it.

        Returns:
            True if v was removed, False if it was not a vertex
        """
        if not self.contains_vertex(v):
            return False
        index = self._vtx_map.pop(v)
        self._remove_fixup(index)
        return True

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vtx_map.clear()
        self._vinfo.clear()
        self._avail.clear()
        self._num_edges = 0
        for state in self._states:
            state.clear()
        self._mod_count += 1

    def vertex_set(self) -> "VertexSet[V]":
        """Return a live set view of the vertices."""
        return VertexSet(self)

    def __len__(self) -> int:
        return len(self._vtx_map)

    def __contains__(self, v) -> bool:
        return self.contains_vertex(v)

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertex_set())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, v1: V, v2: V, weight: int) -> bool:
        """Add the edge (v1, v2) with the given weight.

        Returns:
            True if the edge was added, False if it already existed

        Raises:
            InvalidVertex: if v1 or v2 is not a vertex
            SelfLoopRejected: if v1 and v2 are the same vertex
        """
        pos1 = self._slot_of(v1, "add_edge")
        pos2 = self._slot_of(v2, "add_edge")
        if pos1 == pos2:
            raise SelfLoopRejected(v1)

        info1 = self._vinfo[pos1]
        edge = Edge(pos2, weight)
        if edge in info1.edges:
            return False

        info1.edges.append(edge)
        self._vinfo[pos2].in_degree += 1
        self._num_edges += 1
        return True

    def remove_edge(self, v1: V, v2: V) -> bool:
        """Remove the edge (v1, v2); False if there was no such edge."""
        pos1 = self._slot_of(v1, "remove_edge")
        pos2 = self._slot_of(v2, "remove_edge")

        edges = self._vinfo[pos1].edges
        for pos, edge in enumerate(edges):
            if edge.dest == pos2:
                del edges[pos]
                self._vinfo[pos2].in_degree -= 1
                self._num_edges -= 1
                return True
        return False

    def contains_edge(self, v1: V, v2: V) -> bool:
        pos1 = self._slot_of(v1, "contains_edge")
        pos2 = self._slot_of(v2, "contains_edge")
        return self._vinfo[pos1].find_edge(pos2) is not None

    def get_weight(self, v1: V, v2: V) -> int:
        """Weight of (v1, v2), or NO_EDGE if the edge does not exist."""
        pos1 = self._slot_of(v1, "get_weight")
        pos2 = self._slot_of(v2, "get_weight")
        edge = self._vinfo[pos1].find_edge(pos2)
        if edge is None:
            return NO_EDGE
        return edge.weight

    def set_weight(self, v1: V, v2: V, weight: int) -> int:
        """Update the weight of (v1, v2).

        Returns:
            The previous weight, or NO_EDGE if the edge does not exist (in
            which case nothing changes)
        """
        pos1 = self._slot_of(v1, "set_weight")
        pos2 = self._slot_of(v2, "set_weight")
        edge = self._vinfo[pos1].find_edge(pos2)
        if edge is None:
            return NO_EDGE
        old, edge.weight = edge.weight, weight
        return old

    def in_degree(self, v: V) -> int:
        return self._vinfo[self._slot_of(v, "in_degree")].in_degree

    def out_degree(self, v: V) -> int:
        return len(self._vinfo[self._slot_of(v, "out_degree")].edges)

    def get_neighbors(self, v: V) -> Set[V]:
        """Vertices reachable from v over a single edge."""
        info = self._vinfo[self._slot_of(v, "get_neighbors")]
        return {self._vinfo[edge.dest].vertex for edge in info.edges}

    def adjacent(self, v: V) -> Iterator[Tuple[V, int]]:
        """Yield (neighbor, weight) for each edge leaving v, in insertion order."""
        info = self._vinfo[self._slot_of(v, "adjacent")]
        for edge in info.edges:
            yield self._vinfo[edge.dest].vertex, edge.weight

    def edges(self) -> Iterator[Tuple[V, V, int]]:
        """Yield every edge as (source, destination, weight)."""
        for v, slot in self._vtx_map.items():
            for edge in self._vinfo[slot].edges:
                yield v, self._vinfo[edge.dest].vertex, edge.weight

    # ------------------------------------------------------------------
    # Scratch fields
    # ------------------------------------------------------------------

    def color_white(self) -> None:
        self.scratch.color_white()

    def init_data(self) -> None:
        self.scratch.init_data()

    def get_color(self, v: V) -> VertexColor:
        return self.scratch.get_color(v)

    def set_color(self, v: V, color: VertexColor) -> VertexColor:
        return self.scratch.set_color(v, color)

    def get_parent(self, v: V) -> Optional[V]:
        return self.scratch.get_parent(v)

    def set_parent(self, v: V, p: V) -> Optional[V]:
        return self.scratch.set_parent(v, p)

    def get_data(self, v: V) -> int:
        return self.scratch.get_data(v)

    def set_data(self, v: V, value: int) -> int:
        return self.scratch.set_data(v, value)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        try:
            keys = sorted(self._vtx_map)
        except TypeError:
            keys = sorted(self._vtx_map, key=repr)

        lines = []
        for v in keys:
            info = self._vinfo[self._vtx_map[v]]
            lines.append(f"{v}:  in-degree {info.in_degree}  out-degree {len(info.edges)}")
            edges = "".join(
                f"{self._vinfo[edge.dest].vertex}({edge.weight})  " for edge in info.edges
            )
            lines.append(f"    Edges: {edges}")
        return "".join(line + "\n" for line in lines)

    def __repr__(self) -> str:
        return f"DiGraph(vertices={len(self._vtx_map)}, edges={self._num_edges})"


class VertexSet(AbstractSet, Generic[V]):
    """Live view of a graph's vertices.

    Removing through the view, or through one of its iterators, goes through
    DiGraph.remove_vertex so incident edges are dropped as well.
    """

    def __init__(self, graph: DiGraph[V]):
        self._graph = graph

    @classmethod
    def _from_iterable(cls, it):
        # set operators (&, |, -) build plain sets, not views
        return set(it)

    def __len__(self) -> int:
        return len(self._graph._vtx_map)

    def __contains__(self, v) -> bool:
        return self._graph.contains_vertex(v)

    def __iter__(self) -> "VertexSetIterator[V]":
        return VertexSetIterator(self._graph)

    def add(self, v):
        raise TypeError("vertices are added with DiGraph.add_vertex()")

    def remove(self, v) -> None:
        if not self._graph.remove_vertex(v):
            raise KeyError(v)

    def discard(self, v) -> None:
        self._graph.remove_vertex(v)

    def clear(self) -> None:
        self._graph.clear()

    def __repr__(self) -> str:
        return f"VertexSet({list(self._graph._vtx_map)!r})"


class VertexSetIterator(Generic[V]):
    """Fail-fast iterator over the vertices, with removal support."""

    def __init__(self, graph: DiGraph[V]):
        self._graph = graph
        self._keys = list(graph._vtx_map)
        self._pos = 0
        self._last: Optional[V] = None
        self._can_remove = False
        self._expected = graph._mod_count

    def __iter__(self) -> "VertexSetIterator[V]":
        return self

    def _check(self) -> None:
        if self._graph._mod_count != self._expected:
            raise RuntimeError("graph vertex set changed during iteration")

    def __next__(self) -> V:
        self._check()
        if self._pos >= len(self._keys):
            raise StopIteration
        self._last = self._keys[self._pos]
        self._pos += 1
        self._can_remove = True
        return self._last

    def remove(self) -> None:
        """Remove the vertex most recently returned by next()."""
        if not self._can_remove:
            raise RuntimeError("next() must be called before remove()")
        self._check()
        self._graph.remove_vertex(self._last)
        self._expected = self._graph._mod_count
        self._can_remove = False
