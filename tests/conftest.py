"""
Pytest configuration for the digraph tests.

Graphs are built in-process; the CLI and HTTP tests drive the same package
through argv and Flask's test client.
"""
import pytest

from digraph import DiGraph


def build_graph(vertices, edges):
    """Graph with the given vertices and (source, dest, weight) edges."""
    g = DiGraph()
    for v in vertices:
        g.add_vertex(v)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def build_symmetric(vertices, edges):
    """Graph where every (u, v, w) is stored in both directions."""
    g = build_graph(vertices, [])
    for u, v, w in edges:
        g.add_edge(u, v, w)
        g.add_edge(v, u, w)
    return g


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def make_symmetric():
    return build_symmetric


@pytest.fixture
def graph():
    """Empty graph."""
    return DiGraph()


@pytest.fixture
def weighted_graph():
    """A->B(1), B->C(2), A->C(5), C->D(1)."""
    return build_graph("ABCD", [("A", "B", 1), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)])


@pytest.fixture
def dag_graph():
    """Course-prerequisite style DAG with two roots."""
    return build_graph(
        ["intro", "math", "data", "algo", "ml", "thesis"],
        [
            ("intro", "data", 3),
            ("math", "algo", 2),
            ("data", "algo", 4),
            ("algo", "ml", 1),
            ("math", "ml", 7),
            ("ml", "thesis", 2),
        ],
    )


@pytest.fixture
def cyclic_graph():
    """A->B->C->A with a tail C->D."""
    return build_graph("ABCD", [("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("C", "D", 1)])
