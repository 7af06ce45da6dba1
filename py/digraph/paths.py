"""Path optimisation: hop-count, Dijkstra and DAG shortest paths."""
import heapq
import itertools
import logging
from collections import deque
from typing import Dict, List, Optional

from .components import topological_sort
from .errors import GraphError, InvalidVertex
from .graph import DiGraph
from .state import ScratchState, state_for
from .types import INFINITY, V, VertexColor

logger = logging.getLogger(__name__)


def shortest_path(g: DiGraph[V], start: V, state: Optional[ScratchState] = None) -> None:
    """Fewest-edge paths from start to every reachable vertex.

    On return the data value of each vertex is its distance in edges from
    start, or INFINITY if it cannot be reached. Use path() to read a route.
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "shortest_path")
    state = state_for(g, state)

    state.init_data()
    state.set_parent(start, start)
    state.set_data(start, 0)

    visit_queue = deque([start])
    while visit_queue:
        curr = visit_queue.popleft()
        path_length = state.get_data(curr)

        for neighbor, _ in g.adjacent(curr):
            # an INFINITY data value marks a vertex not yet discovered
            if state.get_data(neighbor) == INFINITY:
                state.set_data(neighbor, path_length + 1)
                state.set_parent(neighbor, curr)
                visit_queue.append(neighbor)


def path(g: DiGraph[V], start: V, end: V, state: Optional[ScratchState] = None) -> List[V]:
    """Route from start to end recorded by the last path algorithm run.

    Returns an empty list when end was not reached.
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "path")
    if not g.contains_vertex(end):
        raise InvalidVertex(end, "path")
    state = state_for(g, state)

    if state.get_data(end) == INFINITY:
        return []

    route = deque()
    curr = end
    while curr != start:
        route.appendleft(curr)
        parent = state.get_parent(curr)
        # a missing or self parent means the last run started somewhere else
        if parent is None or parent == curr:
            raise GraphError(f"path(): no parent chain from {end!r} back to {start!r}")
        curr = parent
    route.appendleft(start)
    return list(route)


def distances(g: DiGraph[V], state: Optional[ScratchState] = None) -> Dict[V, Optional[int]]:
    """Data value of every vertex, with None standing in for INFINITY."""
    state = state_for(g, state)
    result = {}
    for vertex in g.vertex_set():
        value = state.get_data(vertex)
        result[vertex] = None if value == INFINITY else value
    return result


def minimum_path(g: DiGraph[V], start: V, state: Optional[ScratchState] = None) -> None:
    """Minimum-weight paths from start (Dijkstra's algorithm).

    On return the data value of each vertex is the weight of the lightest path
    from start, or INFINITY if it cannot be reached. Weights must not be
    negative; this is not checked.

    The heap may hold several entries for one vertex. Only the first one
    popped counts; later ones find the vertex BLACK and are dropped.
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "minimum_path")
    state = state_for(g, state)

    state.color_white()
    state.init_data()
    state.set_data(start, 0)
    state.set_parent(start, start)

    # ties are broken by insertion order so vertices are never compared
    counter = itertools.count()
    heap = [(0, next(counter), start)]
    num_vertices = g.number_of_vertices()
    num_visited = 0

    while num_visited < num_vertices and heap:
        _, _, curr = heapq.heappop(heap)
        if state.get_color(curr) is VertexColor.BLACK:
            continue

        state.set_color(curr, VertexColor.BLACK)
        num_visited += 1
        curr_weight = state.get_data(curr)

        for neighbor, weight in g.adjacent(curr):
            if state.get_color(neighbor) is not VertexColor.WHITE:
                continue
            new_weight = curr_weight + weight
            if new_weight < state.get_data(neighbor):
                state.set_data(neighbor, new_weight)
                state.set_parent(neighbor, curr)
                heapq.heappush(heap, (new_weight, next(counter), neighbor))

    logger.debug("minimum_path from %r finalised %d of %d vertices",
                 start, num_visited, num_vertices)


def dag_minimum_path(g: DiGraph[V], start: V, state: Optional[ScratchState] = None) -> None:
    """Minimum-weight paths from start in an acyclic graph.

    Relaxes the edges of each vertex once, in topological order.

    Raises:
        InvalidVertex: if start is not a vertex
        CycleDetected: if the graph has a cycle; no data values are written
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "dag_minimum_path")
    state = state_for(g, state)

    order = topological_sort(g, state)

    state.init_data()
    state.set_data(start, 0)
    state.set_parent(start, start)

    for curr in order:
        data = state.get_data(curr)
        # unreachable from start
        if data == INFINITY:
            continue
        for neighbor, weight in g.adjacent(curr):
            new_weight = data + weight
            if new_weight < state.get_data(neighbor):
                state.set_data(neighbor, new_weight)
                state.set_parent(neighbor, curr)
