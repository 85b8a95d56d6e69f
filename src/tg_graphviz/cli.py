"""Command-line interface: graph description text in, DOT or PNG out."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import graphviz

from .export import DotExporter
from .graph import DEFAULT_NODE_SETTINGS, Graph, choose_layout
from .parser import GraphSyntaxError
from .render import DEFAULT_ENGINE, GraphvizRenderer, RenderError

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tg-graphviz",
        description="Convert a list of vertices and edges into a Graphviz graph.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File with the graph description (defaults to stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output path; a .png suffix renders an image, anything else "
        "writes DOT (defaults to DOT on stdout)",
    )
    parser.add_argument(
        "--directed", action="store_true", help="Build a directed graph"
    )
    parser.add_argument(
        "--layout",
        help="Graphviz layout engine (defaults to circo for up to 10 lines, "
        "neato otherwise)",
    )
    parser.add_argument(
        "--node-settings",
        default=DEFAULT_NODE_SETTINGS,
        help="Attribute list applied to every node",
    )
    parser.add_argument(
        "--layout-settings",
        default="",
        help="Raw DOT statements added after the node defaults",
    )
    parser.add_argument(
        "--engine",
        default=DEFAULT_ENGINE,
        choices=sorted(graphviz.ENGINES),
        help="Graphviz command used for PNG output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging for debugging",
    )
    return parser


def _read_input(path: Optional[Path]) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    graph = Graph(
        directed=args.directed,
        layout=args.layout or choose_layout(text),
        layout_settings=args.layout_settings,
        node_settings=args.node_settings,
    )
    try:
        graph.try_parse(text)
    except GraphSyntaxError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    document = graph.to_dot()
    if args.output is None:
        sys.stdout.write(document)
        return 0

    exporter = DotExporter(GraphvizRenderer(engine=args.engine))
    try:
        if args.output.suffix.lower() == ".png":
            exporter.save_png(document, str(args.output))
        else:
            exporter.save_dot(document, str(args.output))
    except (RenderError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("wrote %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
