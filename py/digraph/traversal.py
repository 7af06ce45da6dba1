"""Graph traversal algorithms: BFS and DFS."""
import logging
from collections import deque
from typing import Deque, List, Optional

from .errors import CycleDetected, InvalidVertex
from .graph import DiGraph
from .state import ScratchState, state_for
from .types import V, VertexColor

logger = logging.getLogger(__name__)


def bfs(g: DiGraph[V], start: V, state: Optional[ScratchState] = None) -> List[V]:
    """Breadth-first traversal from start.

    Returns the vertices in the order they were visited. Every vertex is
    colored WHITE first; visited vertices end up BLACK.
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "bfs")
    state = state_for(g, state)

    state.color_white()
    visit_queue = deque([start])
    state.set_color(start, VertexColor.GRAY)
    visit_list = []

    while visit_queue:
        curr = visit_queue.popleft()
        state.set_color(curr, VertexColor.BLACK)
        visit_list.append(curr)

        for neighbor, _ in g.adjacent(curr):
            if state.get_color(neighbor) is VertexColor.WHITE:
                state.set_color(neighbor, VertexColor.GRAY)
                visit_queue.append(neighbor)

    return visit_list


def dfs_visit(g: DiGraph[V], start: V, dfs_list: Deque[V],
              check_for_cycle: bool = False,
              state: Optional[ScratchState] = None) -> None:
    """Depth-first visit of every WHITE vertex reachable from start.

    Finished vertices are colored BLACK and pushed onto the front of dfs_list,
    so the list holds them in decreasing order of finishing time. Colors are
    not reset here; callers color the graph WHITE first.

    Raises:
        InvalidVertex: if start is not a vertex
        CycleDetected: if check_for_cycle is set and a GRAY vertex is reached
    """
    if not g.contains_vertex(start):
        raise InvalidVertex(start, "dfs_visit")
    state = state_for(g, state)

    state.set_color(start, VertexColor.GRAY)
    # each frame is a vertex and the iterator over its remaining edges
    stack = [(start, g.adjacent(start))]

    while stack:
        vertex, edges = stack[-1]
        for neighbor, _ in edges:
            color = state.get_color(neighbor)
            if color is VertexColor.WHITE:
                state.set_color(neighbor, VertexColor.GRAY)
                stack.append((neighbor, g.adjacent(neighbor)))
                break
            if color is VertexColor.GRAY and check_for_cycle:
                raise CycleDetected(vertex, neighbor)
        else:
            stack.pop()
            state.set_color(vertex, VertexColor.BLACK)
            dfs_list.appendleft(vertex)


def dfs(g: DiGraph[V], state: Optional[ScratchState] = None) -> List[V]:
    """Depth-first search over the whole graph.

    Returns every vertex in decreasing order of finishing time.
    """
    state = state_for(g, state)
    dfs_list: Deque[V] = deque()

    state.color_white()
    for vertex in g.vertex_set():
        if state.get_color(vertex) is VertexColor.WHITE:
            dfs_visit(g, vertex, dfs_list, False, state)

    return list(dfs_list)
