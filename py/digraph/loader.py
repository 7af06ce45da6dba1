"""Reading and writing graphs in the plain-text graph format.

The format is a stream of whitespace-separated tokens::

    <vertex count>
    <v1> <v2> ... <vN>
    <edge count>
    <source> <destination> <weight>
    ...

Vertices are added first, then edges. An edge naming an unknown vertex raises
InvalidVertex; a repeated edge is ignored.
"""
import logging
import os
from typing import Iterator, Union

from .errors import GraphFormatError
from .graph import DiGraph

logger = logging.getLogger(__name__)


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise GraphFormatError(f"unexpected end of input, expected {what}") from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"expected integer {what}, got {token!r}") from None


def parse_graph(text: str) -> DiGraph[str]:
    """Build a string-keyed graph from text in the graph format."""
    tokens = iter(text.split())
    graph: DiGraph[str] = DiGraph()

    num_vertices = _next_int(tokens, "vertex count")
    if num_vertices < 0:
        raise GraphFormatError(f"vertex count must not be negative, got {num_vertices}")
    for _ in range(num_vertices):
        graph.add_vertex(_next_token(tokens, "vertex name"))

    num_edges = _next_int(tokens, "edge count")
    if num_edges < 0:
        raise GraphFormatError(f"edge count must not be negative, got {num_edges}")
    for _ in range(num_edges):
        source = _next_token(tokens, "edge source")
        dest = _next_token(tokens, "edge destination")
        weight = _next_int(tokens, "edge weight")
        graph.add_edge(source, dest, weight)

    return graph


def read_graph(filename: Union[str, os.PathLike]) -> DiGraph[str]:
    """Build a graph from a file in the graph format."""
    with open(filename, 'r') as f:
        graph = parse_graph(f.read())
    logger.info("Loaded %s: %d vertices, %d edges", filename,
                graph.number_of_vertices(), graph.number_of_edges())
    return graph


def format_graph(graph: DiGraph) -> str:
    """Describe each vertex with its degrees and weighted edges."""
    return str(graph)


def dump_graph(graph: DiGraph) -> str:
    """Render graph in the format parse_graph reads."""
    vertices = list(graph.vertex_set())
    edges = list(graph.edges())
    lines = [str(len(vertices)), " ".join(str(v) for v in vertices), str(len(edges))]
    lines.extend(f"{u} {v} {w}" for u, v, w in edges)
    return "\n".join(lines) + "\n"
