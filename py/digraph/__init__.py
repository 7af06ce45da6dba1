"""Directed weighted graph engine - public API."""
from .types import INFINITY, NO_EDGE, VertexColor
from .errors import (
    GraphError, InvalidVertex, SelfLoopRejected, CycleDetected,
    Disconnected, EmptyGraph, GraphFormatError, UnknownCommand
)
from .state import ScratchState
from .graph import DiGraph, VertexSet
from .traversal import bfs, dfs, dfs_visit
from .components import topological_sort, acyclic, transpose, strong_components
from .paths import shortest_path, path, distances, minimum_path, dag_minimum_path
from .spanning import SpanningTree, min_span_tree
from .loader import parse_graph, read_graph, format_graph, dump_graph

__all__ = [
    'INFINITY', 'NO_EDGE', 'VertexColor',
    'GraphError', 'InvalidVertex', 'SelfLoopRejected', 'CycleDetected',
    'Disconnected', 'EmptyGraph', 'GraphFormatError', 'UnknownCommand',
    'ScratchState', 'DiGraph', 'VertexSet',
    'bfs', 'dfs', 'dfs_visit',
    'topological_sort', 'acyclic', 'transpose', 'strong_components',
    'shortest_path', 'path', 'distances', 'minimum_path', 'dag_minimum_path',
    'SpanningTree', 'min_span_tree',
    'parse_graph', 'read_graph', 'format_graph', 'dump_graph'
]
