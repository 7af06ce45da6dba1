"""Command line entry point (python -m digraph)."""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .commands import COMMANDS, run_command
from .errors import GraphError
from .graph import DiGraph
from .loader import format_graph, read_graph

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='digraph', description='Directed weighted graph algorithms'
    )
    parser.add_argument('--log-level', type=str,
                        help='Logging level (default: $LOG_LEVEL or WARNING)')
    sub = parser.add_subparsers(dest='command', required=True)

    for name in COMMANDS:
        cmd = sub.add_parser(name, help=f'run {name} on a graph file')
        cmd.add_argument('graph_file', help='graph in the text format')
        cmd.add_argument('--source', type=str, help='starting vertex')
        cmd.add_argument('--target', type=str, help='ending vertex for path commands')

    show = sub.add_parser('show', help='print vertices with degrees and edges')
    show.add_argument('graph_file', help='graph in the text format')

    serve = sub.add_parser('serve', help='serve a graph over HTTP')
    serve.add_argument('graph_file', nargs='?', help='graph to load at startup')
    serve.add_argument('--host', type=str, help='Interface to bind')
    serve.add_argument('--port', type=int, help='HTTP server port')

    return parser


def serve(args: argparse.Namespace) -> None:
    # imported here so the CLI works without the web stack loaded
    from .server import create_app

    # Get configuration from args, env, or defaults
    host = args.host or os.environ.get('HOST', '127.0.0.1')
    port = args.port or int(os.environ.get('PORT', '8080'))

    graph = read_graph(args.graph_file) if args.graph_file else DiGraph()
    app = create_app(graph)
    logger.info("Serving graph on %s:%d", host, port)
    app.run(host=host, port=port, threaded=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = (args.log_level or os.environ.get('LOG_LEVEL', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        print(json.dumps({"error": "bad_config", "message": f"unknown log level {level!r}"}))
        return 1
    logging.basicConfig(level=level, format='[%(levelname)s] %(name)s: %(message)s')

    try:
        if args.command == 'serve':
            serve(args)
            return 0

        graph = read_graph(args.graph_file)
        if args.command == 'show':
            print(format_graph(graph), end='')
            return 0

        options = {'source': args.source, 'target': args.target}
        result = run_command(graph, args.command, **options)
    except GraphError as exc:
        print(json.dumps(exc.to_dict()))
        return 1
    except OSError as exc:
        print(json.dumps({"error": "io_error", "message": str(exc)}))
        return 1

    print(json.dumps(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
