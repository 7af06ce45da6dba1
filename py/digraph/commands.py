"""Named algorithm commands shared by the CLI and the HTTP API.

Each command takes a graph plus keyword options and returns a JSON-ready dict.
"""
from typing import Any, Callable, Dict, Optional

from .components import acyclic, strong_components, topological_sort, transpose
from .errors import GraphError, UnknownCommand
from .graph import DiGraph
from .paths import dag_minimum_path, distances, minimum_path, path, shortest_path
from .spanning import min_span_tree
from .traversal import bfs, dfs


def _require(options: Dict[str, Any], name: str, command: str) -> Any:
    value = options.get(name)
    if value is None:
        raise GraphError(f"{command}: missing required option '{name}'")
    return value


def _edge_list(graph: DiGraph) -> list:
    return [{"from": u, "to": v, "weight": w} for u, v, w in graph.edges()]


def graph_info(graph: DiGraph, **options) -> Dict[str, Any]:
    """Vertex and edge counts plus per-vertex degrees."""
    return {
        "vertex_count": graph.number_of_vertices(),
        "edge_count": graph.number_of_edges(),
        "vertices": [
            {"id": v, "in_degree": graph.in_degree(v), "out_degree": graph.out_degree(v)}
            for v in graph.vertex_set()
        ],
    }


def _bfs(graph: DiGraph, **options) -> Dict[str, Any]:
    return {"order": bfs(graph, _require(options, "source", "bfs"))}


def _dfs(graph: DiGraph, **options) -> Dict[str, Any]:
    return {"order": dfs(graph)}


def _topological_sort(graph: DiGraph, **options) -> Dict[str, Any]:
    return {"order": topological_sort(graph)}


def _acyclic(graph: DiGraph, **options) -> Dict[str, Any]:
    return {"acyclic": acyclic(graph)}


def _transpose(graph: DiGraph, **options) -> Dict[str, Any]:
    gt = transpose(graph)
    return {"vertices": list(gt.vertex_set()), "edges": _edge_list(gt)}


def _path_command(algorithm: Callable, name: str) -> Callable[..., Dict[str, Any]]:
    def command(graph: DiGraph, **options) -> Dict[str, Any]:
        source = _require(options, "source", name)
        algorithm(graph, source)

        target = options.get("target")
        if target is None:
            return {"source": source, "distances": distances(graph)}

        route = path(graph, source, target)
        distance: Optional[int] = distances(graph)[target] if route else None
        return {
            "source": source,
            "target": target,
            "exists": bool(route),
            "path": route,
            "distance": distance,
        }

    command.__doc__ = f"Run {algorithm.__name__} and report distances or one path."
    return command


def _min_span_tree(graph: DiGraph, **options) -> Dict[str, Any]:
    result = min_span_tree(graph)
    return {"weight": result.weight, "edges": _edge_list(result.tree)}


def _strong_components(graph: DiGraph, **options) -> Dict[str, Any]:
    components = strong_components(graph)
    return {"count": len(components), "components": components}


COMMANDS: Dict[str, Callable[..., Dict[str, Any]]] = {
    'info': graph_info,
    'bfs': _bfs,
    'dfs': _dfs,
    'topological-sort': _topological_sort,
    'acyclic': _acyclic,
    'transpose': _transpose,
    'shortest-path': _path_command(shortest_path, 'shortest-path'),
    'minimum-path': _path_command(minimum_path, 'minimum-path'),
    'dag-minimum-path': _path_command(dag_minimum_path, 'dag-minimum-path'),
    'min-span-tree': _min_span_tree,
    'strong-components': _strong_components,
}


def run_command(graph: DiGraph, name: str, **options) -> Dict[str, Any]:
    """Run the command registered under name."""
    try:
        command = COMMANDS[name]
    except KeyError:
        raise UnknownCommand(name) from None
    return command(graph, **options)
