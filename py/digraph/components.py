"""Topological sort, cycle detection, transpose and strong components."""
import logging
from collections import deque
from typing import Deque, List, Optional

from .errors import CycleDetected
from .graph import DiGraph
from .state import ScratchState, state_for
from .traversal import dfs, dfs_visit
from .types import V, VertexColor

logger = logging.getLogger(__name__)


def topological_sort(g: DiGraph[V], state: Optional[ScratchState] = None) -> List[V]:
    """Order the vertices so that every edge points forward.

    Raises:
        CycleDetected: if the graph has a cycle
    """
    state = state_for(g, state)
    tlist: Deque[V] = deque()

    state.color_white()
    try:
        for vertex in g.vertex_set():
            if state.get_color(vertex) is VertexColor.WHITE:
                dfs_visit(g, vertex, tlist, True, state)
    except CycleDetected as exc:
        raise CycleDetected(exc.source, exc.target, "topological_sort") from exc

    return list(tlist)


def acyclic(g: DiGraph[V], state: Optional[ScratchState] = None) -> bool:
    """Check whether the graph is free of cycles."""
    state = state_for(g, state)
    dfs_list: Deque[V] = deque()

    state.color_white()
    try:
        for vertex in g.vertex_set():
            if state.get_color(vertex) is VertexColor.WHITE:
                dfs_visit(g, vertex, dfs_list, True, state)
    except CycleDetected as exc:
        logger.debug("Cycle through %r and %r", exc.source, exc.target)
        return False

    return True


def transpose(g: DiGraph[V]) -> DiGraph[V]:
    """Return a new graph with every edge of g reversed.

    Vertices keep their order; weights are carried over. g is not modified.
    """
    gt: DiGraph[V] = DiGraph()
    for vertex in g.vertex_set():
        gt.add_vertex(vertex)
    for source, dest, weight in g.edges():
        gt.add_edge(dest, source, weight)
    return gt


def strong_components(g: DiGraph[V], state: Optional[ScratchState] = None) -> List[List[V]]:
    """Find strongly connected components (Kosaraju's algorithm).

    Returns one list per component. The components appear in the order their
    seed vertices are met in decreasing finishing time of a DFS over g.
    """
    # Step 1: order by decreasing finishing time in g
    dfs_order = dfs(g, state)

    # Step 2: DFS over the transpose, seeded in that order
    gt = transpose(g)
    gt.color_white()

    components = []
    for vertex in dfs_order:
        if gt.get_color(vertex) is VertexColor.WHITE:
            component: Deque[V] = deque()
            dfs_visit(gt, vertex, component, False)
            components.append(list(component))

    logger.debug("Found %d strong components in %r", len(components), g)
    return components
