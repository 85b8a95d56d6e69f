"""
tg-graphviz - Graphviz graphs from plain vertex lists

Converts a short line-oriented description of nodes and edges into a DOT
document for the Graphviz renderer.

Example:
    >>> from tg_graphviz import Graph
    >>> graph = Graph(directed=True, layout="circo")
    >>> graph.try_parse('''
    ...     A B Edge1
    ...     B C
    ...     D
    ... ''')
    >>> print(graph.to_dot())
"""

from .export import DotExporter
from .graph import (
    COMPACT_LAYOUT,
    DEFAULT_LAYOUT,
    DEFAULT_NODE_SETTINGS,
    Graph,
    choose_layout,
)
from .models import Edge, Node
from .parser import (
    MAX_LABEL_LENGTH,
    MAX_LINES,
    GraphSyntaxError,
    LabelTooLongError,
    ParseResult,
    Parser,
    TooManyLinesError,
    parse_graph,
)
from .render import GraphvizRenderer, Renderer, RenderError
from .session import Dialogue, DialogueState, Reply, SessionStore, Stage
from .text import display_length, number_of_lines, tokenize_line

__version__ = "0.1.0"

__all__ = [
    # Model
    "Graph",
    "Node",
    "Edge",
    # Parser
    "Parser",
    "ParseResult",
    "parse_graph",
    "GraphSyntaxError",
    "TooManyLinesError",
    "LabelTooLongError",
    "MAX_LINES",
    "MAX_LABEL_LENGTH",
    # Layout configuration
    "choose_layout",
    "COMPACT_LAYOUT",
    "DEFAULT_LAYOUT",
    "DEFAULT_NODE_SETTINGS",
    # Text utilities
    "display_length",
    "tokenize_line",
    "number_of_lines",
    # Rendering and export
    "Renderer",
    "GraphvizRenderer",
    "RenderError",
    "DotExporter",
    # Dialogue
    "Dialogue",
    "DialogueState",
    "Reply",
    "SessionStore",
    "Stage",
]
