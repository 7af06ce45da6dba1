"""HTTP routes exposing a graph and its algorithms."""
import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request

from .commands import COMMANDS, run_command
from .errors import (
    CycleDetected, Disconnected, EmptyGraph, GraphError, InvalidVertex,
    UnknownCommand
)
from .graph import DiGraph
from .loader import dump_graph
from .types import NO_EDGE

logger = logging.getLogger(__name__)

_STATUS = {
    InvalidVertex: 404,
    UnknownCommand: 404,
    CycleDetected: 409,
    Disconnected: 409,
    EmptyGraph: 409,
}


def _status_for(exc: GraphError) -> int:
    for cls, status in _STATUS.items():
        if isinstance(exc, cls):
            return status
    return 400


def create_app(graph: Optional[DiGraph] = None) -> Flask:
    """Create and configure Flask app.

    Args:
        graph: Graph to serve; a new empty graph when omitted

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    graph = graph if graph is not None else DiGraph()
    # algorithms share the graph's scratch fields, so one request at a time
    lock = threading.Lock()
    app.config['GRAPH'] = graph

    def _json_body() -> Dict[str, Any]:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise GraphError("request body must be a JSON object")
        return data

    def _weight(data: Dict[str, Any]) -> int:
        weight = data.get('weight', 1)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise GraphError("weight must be an integer")
        return weight

    @app.errorhandler(GraphError)
    def handle_graph_error(exc: GraphError):
        status = _status_for(exc)
        logger.debug("%s %s -> %d %s", request.method, request.path, status, exc)
        return jsonify(exc.to_dict()), status

    @app.route('/stats', methods=['GET'])
    def get_stats():
        """Get vertex and edge counts."""
        with lock:
            return jsonify({
                'vertex_count': graph.number_of_vertices(),
                'edge_count': graph.number_of_edges(),
            })

    @app.route('/graph', methods=['GET'])
    def get_graph():
        """Whole graph in the text format."""
        with lock:
            text = dump_graph(graph)
        return Response(text, mimetype='text/plain')

    @app.route('/vertices', methods=['GET'])
    def list_vertices():
        with lock:
            return jsonify({'vertices': list(graph.vertex_set())})

    @app.route('/vertices/<path:vertex>', methods=['PUT'])
    def add_vertex(vertex: str):
        """Add a vertex; 201 if new, 200 if it already existed."""
        with lock:
            added = graph.add_vertex(vertex)
        return jsonify({'added': added}), 201 if added else 200

    @app.route('/vertices/<path:vertex>', methods=['GET'])
    def get_vertex(vertex: str):
        with lock:
            return jsonify({
                'id': vertex,
                'in_degree': graph.in_degree(vertex),
                'out_degree': graph.out_degree(vertex),
                'edges': [{'to': v, 'weight': w} for v, w in graph.adjacent(vertex)],
            })

    @app.route('/vertices/<path:vertex>', methods=['DELETE'])
    def delete_vertex(vertex: str):
        """Remove a vertex and its edges."""
        with lock:
            if not graph.remove_vertex(vertex):
                raise InvalidVertex(vertex, "remove_vertex")
            return jsonify({'success': True, 'edge_count': graph.number_of_edges()})

    @app.route('/edges', methods=['POST'])
    def add_edge():
        """Add an edge from a JSON body {"from", "to", "weight"}."""
        data = _json_body()
        if 'from' not in data or 'to' not in data:
            raise GraphError("edge needs 'from' and 'to'")
        weight = _weight(data)
        with lock:
            added = graph.add_edge(data['from'], data['to'], weight)
        return jsonify({'added': added}), 201 if added else 200

    def _endpoints(source: Optional[str], dest: Optional[str]):
        # /edges?from=a/b&to=c reaches vertices whose names contain '/'
        if source is None:
            source = request.args.get('from')
            dest = request.args.get('to')
            if source is None or dest is None:
                raise GraphError("edge needs 'from' and 'to'")
        return source, dest

    @app.route('/edges', methods=['GET'])
    @app.route('/edges/<source>/<dest>', methods=['GET'])
    def get_edge(source: Optional[str] = None, dest: Optional[str] = None):
        source, dest = _endpoints(source, dest)
        with lock:
            weight = graph.get_weight(source, dest)
        if weight == NO_EDGE:
            return jsonify({'error': 'edge_not_found'}), 404
        return jsonify({'from': source, 'to': dest, 'weight': weight})

    @app.route('/edges', methods=['PUT'])
    @app.route('/edges/<source>/<dest>', methods=['PUT'])
    def set_edge_weight(source: Optional[str] = None, dest: Optional[str] = None):
        """Change the weight of an existing edge."""
        source, dest = _endpoints(source, dest)
        weight = _weight(_json_body())
        with lock:
            previous = graph.set_weight(source, dest, weight)
        if previous == NO_EDGE:
            return jsonify({'error': 'edge_not_found'}), 404
        return jsonify({'previous': previous, 'weight': weight})

    @app.route('/edges', methods=['DELETE'])
    @app.route('/edges/<source>/<dest>', methods=['DELETE'])
    def delete_edge(source: Optional[str] = None, dest: Optional[str] = None):
        source, dest = _endpoints(source, dest)
        with lock:
            removed = graph.remove_edge(source, dest)
        if not removed:
            return jsonify({'error': 'edge_not_found'}), 404
        return jsonify({'success': True})

    @app.route('/commands', methods=['GET'])
    def list_commands():
        return jsonify({'commands': sorted(COMMANDS)})

    @app.route('/commands/<name>', methods=['POST'])
    def call_command(name: str):
        """Run a named algorithm with options from the JSON body."""
        body = _json_body()
        options = {key: body[key] for key in ('source', 'target') if key in body}
        with lock:
            result = run_command(graph, name, **options)
        return jsonify(result)

    return app
