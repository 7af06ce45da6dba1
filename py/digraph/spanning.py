"""Minimum spanning tree (Prim's algorithm)."""
import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Generic, Optional

from .errors import Disconnected, EmptyGraph
from .graph import DiGraph
from .state import ScratchState, state_for
from .types import V, VertexColor

logger = logging.getLogger(__name__)


@dataclass
class SpanningTree(Generic[V]):
    """Result of min_span_tree: total weight and the tree itself."""
    weight: int
    tree: DiGraph


def min_span_tree(g: DiGraph[V], state: Optional[ScratchState] = None) -> SpanningTree[V]:
    """Minimum spanning tree of a connected graph.

    The graph stands for an undirected one: each edge (u, v) should be matched
    by (v, u) with the same weight. This is not checked; on other input the
    tree is built from whichever edges leave the vertices already spanned.

    The returned tree holds every vertex, and for each vertex other than the
    start both directions of the edge joining it to its parent.

    Raises:
        EmptyGraph: if g has no vertices
        Disconnected: if some vertex cannot be reached
    """
    if g.is_empty():
        raise EmptyGraph("min_span_tree(): graph has no vertices")
    state = state_for(g, state)

    state.color_white()
    state.init_data()

    vertices = list(g.vertex_set())
    start = vertices[0]
    state.set_data(start, 0)
    state.set_parent(start, start)

    counter = itertools.count()
    heap = [(0, next(counter), start)]
    num_vertices = len(vertices)
    tree_size = 0
    tree_weight = 0

    while True:
        if not heap:
            raise Disconnected(tree_size, num_vertices)

        edge_weight, _, curr = heapq.heappop(heap)
        if state.get_color(curr) is not VertexColor.WHITE:
            continue

        state.set_color(curr, VertexColor.BLACK)
        tree_weight += edge_weight
        tree_size += 1
        if tree_size == num_vertices:
            break

        for neighbor, weight in g.adjacent(curr):
            if state.get_color(neighbor) is not VertexColor.WHITE:
                continue
            if weight < state.get_data(neighbor):
                state.set_data(neighbor, weight)
                state.set_parent(neighbor, curr)
                heapq.heappush(heap, (weight, next(counter), neighbor))

    tree: DiGraph[V] = DiGraph()
    for vertex in vertices:
        tree.add_vertex(vertex)
    for vertex in vertices[1:]:
        parent = state.get_parent(vertex)
        weight = g.get_weight(parent, vertex)
        tree.add_edge(parent, vertex, weight)
        tree.add_edge(vertex, parent, weight)

    logger.debug("Spanning tree of %r has weight %d", g, tree_weight)
    return SpanningTree(tree_weight, tree)
