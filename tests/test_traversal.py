"""Tests for BFS, DFS, topological sort, cycle checks and transpose."""
from collections import deque

import pytest

from digraph import (
    CycleDetected, DiGraph, InvalidVertex, ScratchState, VertexColor,
    acyclic, bfs, dfs, dfs_visit, topological_sort, transpose
)


def assert_topological(g, order):
    index = {v: i for i, v in enumerate(order)}
    assert sorted(order, key=repr) == sorted(g.vertex_set(), key=repr)
    for u, v, _ in g.edges():
        assert index[u] < index[v], f"edge {u}->{v} points backwards"


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_single_vertex(self, make_graph):
        g = make_graph("A", [])
        assert bfs(g, "A") == ["A"]

    def test_bfs_levels(self, make_graph):
        """Vertices come out level by level."""
        g = make_graph("ABCDE", [
            ("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "E", 1)
        ])
        order = bfs(g, "A")
        assert order[0] == "A"
        assert set(order[1:3]) == {"B", "C"}
        assert set(order[3:]) == {"D", "E"}

    def test_bfs_only_reachable(self, make_graph):
        """Vertices not reachable from the start are skipped."""
        g = make_graph("ABC", [("B", "A", 1)])
        assert bfs(g, "A") == ["A"]

    def test_bfs_cycle_visits_once(self, cyclic_graph):
        order = bfs(cyclic_graph, "A")
        assert sorted(order) == ["A", "B", "C", "D"]

    def test_bfs_colors(self, make_graph):
        """Visited vertices end BLACK, the rest WHITE."""
        g = make_graph("ABC", [("A", "B", 1)])
        bfs(g, "A")
        assert g.get_color("A") is VertexColor.BLACK
        assert g.get_color("B") is VertexColor.BLACK
        assert g.get_color("C") is VertexColor.WHITE

    def test_bfs_missing_start(self, graph):
        with pytest.raises(InvalidVertex):
            bfs(graph, "A")

    def test_bfs_after_dirty_colors(self, weighted_graph):
        """BFS resets colors at entry."""
        for v in "ABCD":
            weighted_graph.set_color(v, VertexColor.BLACK)
        assert sorted(bfs(weighted_graph, "A")) == ["A", "B", "C", "D"]


class TestDFS:
    """Tests for depth-first visit and search."""

    def test_dfs_visit_finishing_order(self, make_graph):
        """The list holds vertices by decreasing finishing time."""
        g = make_graph("ABCD", [("A", "B", 1), ("B", "C", 1), ("A", "D", 1)])
        g.color_white()
        out = deque()
        dfs_visit(g, "A", out)
        # C finishes first, then B, then D, then A
        assert list(out) == ["A", "D", "B", "C"]
        assert all(g.get_color(v) is VertexColor.BLACK for v in "ABCD")

    def test_dfs_visit_cycle_check(self, cyclic_graph):
        cyclic_graph.color_white()
        with pytest.raises(CycleDetected) as info:
            dfs_visit(cyclic_graph, "A", deque(), True)
        assert {info.value.source, info.value.target} == {"C", "A"}

    def test_dfs_visit_cycle_ignored_without_check(self, cyclic_graph):
        cyclic_graph.color_white()
        out = deque()
        dfs_visit(cyclic_graph, "A", out)
        assert sorted(out) == ["A", "B", "C", "D"]

    def test_dfs_visit_missing_vertex(self, graph):
        with pytest.raises(InvalidVertex):
            dfs_visit(graph, "A", deque())

    def test_dfs_covers_all_vertices(self, make_graph):
        """dfs restarts from every WHITE vertex in vertex-set order."""
        g = make_graph("ABCDE", [("A", "B", 1), ("C", "D", 1)])
        assert dfs(g) == ["E", "C", "D", "A", "B"]

    def test_dfs_deep_chain(self):
        """Long chains do not hit the recursion limit."""
        g = DiGraph()
        n = 5000
        for i in range(n):
            g.add_vertex(i)
        for i in range(n - 1):
            g.add_edge(i, i + 1, 1)
        assert dfs(g) == list(range(n))
        assert acyclic(g) is True

    def test_dfs_empty_graph(self, graph):
        assert dfs(graph) == []


class TestTopologicalSort:
    """Tests for topological sort and the acyclic check."""

    def test_topological_order(self, dag_graph):
        order = topological_sort(dag_graph)
        assert_topological(dag_graph, order)

    def test_topological_chain(self, make_graph):
        g = make_graph("DCBA", [("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])
        assert topological_sort(g) == ["A", "B", "C", "D"]

    def test_topological_sort_cycle(self, cyclic_graph):
        with pytest.raises(CycleDetected) as info:
            topological_sort(cyclic_graph)
        assert "topological_sort" in str(info.value)

    def test_two_cycle(self, make_graph):
        g = make_graph("AB", [("A", "B", 1), ("B", "A", 1)])
        with pytest.raises(CycleDetected):
            topological_sort(g)
        assert acyclic(g) is False

    def test_acyclic(self, dag_graph, cyclic_graph):
        assert acyclic(dag_graph) is True
        assert acyclic(cyclic_graph) is False

    def test_acyclic_after_breaking_cycle(self, cyclic_graph):
        cyclic_graph.remove_edge("C", "A")
        assert acyclic(cyclic_graph) is True
        assert_topological(cyclic_graph, topological_sort(cyclic_graph))

    def test_diamond_is_acyclic(self, make_graph):
        """Cross edges to BLACK vertices are not cycles."""
        g = make_graph("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])
        assert acyclic(g) is True

    def test_empty_graph(self, graph):
        assert topological_sort(graph) == []
        assert acyclic(graph) is True

    def test_with_separate_state(self, dag_graph):
        """A private state leaves the graph's own colors alone."""
        dag_graph.color_white()
        state = ScratchState(dag_graph)
        assert_topological(dag_graph, topological_sort(dag_graph, state))
        assert all(dag_graph.get_color(v) is VertexColor.WHITE for v in dag_graph)

    def test_state_from_other_graph(self, dag_graph, weighted_graph):
        with pytest.raises(ValueError):
            topological_sort(dag_graph, ScratchState(weighted_graph))


class TestTranspose:
    """Tests for transpose."""

    def test_transpose_reverses_edges(self, weighted_graph):
        gt = transpose(weighted_graph)
        assert list(gt.vertex_set()) == ["A", "B", "C", "D"]
        assert sorted(gt.edges()) == [
            ("B", "A", 1), ("C", "A", 5), ("C", "B", 2), ("D", "C", 1)
        ]
        assert gt.number_of_edges() == weighted_graph.number_of_edges()
        assert gt.in_degree("A") == 2

    def test_transpose_leaves_input(self, weighted_graph):
        before = sorted(weighted_graph.edges())
        transpose(weighted_graph)
        assert sorted(weighted_graph.edges()) == before

    def test_double_transpose(self, dag_graph):
        gtt = transpose(transpose(dag_graph))
        assert set(gtt.vertex_set()) == set(dag_graph.vertex_set())
        assert sorted(gtt.edges()) == sorted(dag_graph.edges())
