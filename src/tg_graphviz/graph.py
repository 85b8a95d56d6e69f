"""
Graph module for DOT generation.

Holds parsed nodes and edges together with the rendering configuration and
serializes them to a Graphviz DOT document.
"""

import logging
from typing import List, Optional

from .models import Edge, Node
from .parser import Parser
from .text import number_of_lines

logger = logging.getLogger(__name__)

COMPACT_LAYOUT = "circo"
DEFAULT_LAYOUT = "neato"
COMPACT_LAYOUT_MAX_LINES = 10
DEFAULT_NODE_SETTINGS = 'width=0.5 height=0.5 fontname="Arial"'


def choose_layout(input_text: str) -> str:
    """Pick a compact circular layout for short inputs, neato otherwise."""
    if number_of_lines(input_text) <= COMPACT_LAYOUT_MAX_LINES:
        return COMPACT_LAYOUT
    return DEFAULT_LAYOUT


def quote(value: str) -> str:
    """Return ``value`` as a double-quoted DOT string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Graph:
    """
    Graph description with rendering configuration.

    The configuration is fixed at construction. Nodes and edges are replaced
    by every call to ``try_parse``.

    Example:
        >>> graph = Graph(directed=True, layout="circo")
        >>> graph.try_parse("A B Edge1\\nB C")
        >>> print(graph.to_dot())
    """

    def __init__(
        self,
        directed: bool = False,
        layout: str = DEFAULT_LAYOUT,
        layout_settings: str = "",
        node_settings: str = DEFAULT_NODE_SETTINGS,
        parser: Optional[Parser] = None,
    ):
        """
        Initialize the graph.

        Args:
            directed: Emit a digraph with ``->`` edges instead of ``--``.
            layout: Graphviz layout engine name (e.g. "circo", "neato").
            layout_settings: Raw DOT statements inserted verbatim after the
                node defaults.
            node_settings: Raw attribute list applied to every node.
            parser: Parser to use; defaults to one with the standard limits.
        """
        self._directed = directed
        self._layout = layout
        self._layout_settings = layout_settings
        self._node_settings = node_settings
        self._parser = parser or Parser()
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def layout(self) -> str:
        return self._layout

    @property
    def layout_settings(self) -> str:
        return self._layout_settings

    @property
    def node_settings(self) -> str:
        return self._node_settings

    @property
    def nodes(self) -> List[Node]:
        """Standalone nodes in input order."""
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        """Edges in input order."""
        return list(self._edges)

    def try_parse(self, input_text: str) -> None:
        """
        Replace the graph contents with the entities described by input_text.

        The graph is emptied first and only populated once the whole input
        has been validated, so a failed parse leaves it empty.

        Raises:
            TooManyLinesError: If the input has too many lines.
            LabelTooLongError: If a token exceeds the label length limit.
        """
        self._nodes = []
        self._edges = []

        result = self._parser.parse(input_text)

        self._nodes = result.nodes
        self._edges = result.edges

    def to_dot(self) -> str:
        """Serialize the graph to a DOT document."""
        arrow = "->" if self._directed else "--"
        lines = [
            ("digraph" if self._directed else "graph") + " {",
            f"\tlayout={quote(self._layout)}",
            f"\tnode [{self._node_settings}]",
        ]
        if self._layout_settings:
            settings = self._layout_settings
            if settings.endswith("\n"):
                settings = settings[:-1]
            lines.append(settings)

        for node in self._nodes:
            lines.append(f"\t{quote(node.label)}")

        for edge in self._edges:
            lines.append(
                f"\t{quote(edge.source)} {arrow} {quote(edge.target)} "
                f"[label={quote(edge.label)}]"
            )

        lines.append("}")
        dot = "\n".join(lines) + "\n"
        logger.debug("generated DOT document:\n%s", dot)
        return dot
