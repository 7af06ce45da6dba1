"""Tests for the command line entry point and the command table."""
import json

import pytest

from digraph import UnknownCommand, parse_graph
from digraph.__main__ import main
from digraph.commands import COMMANDS, run_command

SAMPLE = "4\nA B C D\n4\nA B 1\nB C 2\nA C 5\nC D 1\n"
CYCLE = "3\nA B C\n3\nA B 1\nB C 1\nC A 1\n"


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(SAMPLE)
    return str(path)


@pytest.fixture
def cycle_file(tmp_path):
    path = tmp_path / "cycle.txt"
    path.write_text(CYCLE)
    return str(path)


def run_cli(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, out


class TestCommands:
    """Tests for the command table."""

    def test_all_commands_registered(self):
        assert set(COMMANDS) == {
            'info', 'bfs', 'dfs', 'topological-sort', 'acyclic', 'transpose',
            'shortest-path', 'minimum-path', 'dag-minimum-path',
            'min-span-tree', 'strong-components',
        }

    def test_unknown_command(self):
        with pytest.raises(UnknownCommand):
            run_command(parse_graph(SAMPLE), 'nope')

    def test_info(self):
        result = run_command(parse_graph(SAMPLE), 'info')
        assert result["vertex_count"] == 4
        assert result["edge_count"] == 4
        assert result["vertices"][2] == {"id": "C", "in_degree": 2, "out_degree": 1}

    def test_path_without_target(self):
        result = run_command(parse_graph(SAMPLE), 'minimum-path', source='A')
        assert result["distances"] == {"A": 0, "B": 1, "C": 3, "D": 4}

    def test_path_with_unreachable_target(self):
        result = run_command(parse_graph(SAMPLE), 'shortest-path', source='D', target='A')
        assert result["exists"] is False
        assert result["path"] == []
        assert result["distance"] is None


class TestMain:
    """Tests for python -m digraph."""

    def test_minimum_path(self, capsys, graph_file):
        code, out = run_cli(capsys, 'minimum-path', graph_file, '--source', 'A', '--target', 'D')
        assert code == 0
        result = json.loads(out)
        assert result["path"] == ["A", "B", "C", "D"]
        assert result["distance"] == 4

    def test_shortest_path(self, capsys, graph_file):
        code, out = run_cli(capsys, 'shortest-path', graph_file, '--source', 'A')
        assert code == 0
        assert json.loads(out)["distances"] == {"A": 0, "B": 1, "C": 1, "D": 2}

    def test_topological_sort(self, capsys, graph_file):
        code, out = run_cli(capsys, 'topological-sort', graph_file)
        assert code == 0
        assert json.loads(out)["order"] == ["A", "B", "C", "D"]

    def test_cycle_reported(self, capsys, cycle_file):
        code, out = run_cli(capsys, 'topological-sort', cycle_file)
        assert code == 1
        assert json.loads(out)["error"] == "cycle_detected"

    def test_acyclic(self, capsys, cycle_file):
        code, out = run_cli(capsys, 'acyclic', cycle_file)
        assert code == 0
        assert json.loads(out) == {"acyclic": False}

    def test_strong_components(self, capsys, cycle_file):
        code, out = run_cli(capsys, 'strong-components', cycle_file)
        result = json.loads(out)
        assert result["count"] == 1
        assert sorted(result["components"][0]) == ["A", "B", "C"]

    def test_missing_source(self, capsys, graph_file):
        code, out = run_cli(capsys, 'bfs', graph_file)
        assert code == 1
        assert "source" in json.loads(out)["message"]

    def test_invalid_source(self, capsys, graph_file):
        code, out = run_cli(capsys, 'bfs', graph_file, '--source', 'Z')
        assert code == 1
        assert json.loads(out)["error"] == "invalid_vertex"

    def test_missing_file(self, capsys, tmp_path):
        code, out = run_cli(capsys, 'dfs', str(tmp_path / "none.txt"))
        assert code == 1
        assert json.loads(out)["error"] == "io_error"

    def test_unknown_log_level(self, capsys, graph_file):
        code, out = run_cli(capsys, '--log-level', 'verbose', 'dfs', graph_file)
        assert code == 1
        assert json.loads(out)["error"] == "bad_config"

    def test_unknown_log_level_from_env(self, capsys, monkeypatch, graph_file):
        monkeypatch.setenv('LOG_LEVEL', 'loud')
        code, out = run_cli(capsys, 'dfs', graph_file)
        assert code == 1
        assert "loud" in json.loads(out)["message"].lower()

    def test_log_level_is_case_insensitive(self, capsys, graph_file):
        code, _ = run_cli(capsys, '--log-level', 'debug', 'dfs', graph_file)
        assert code == 0

    def test_show(self, capsys, graph_file):
        code, out = run_cli(capsys, 'show', graph_file)
        assert code == 0
        assert out.startswith("A:  in-degree 0  out-degree 2\n")
