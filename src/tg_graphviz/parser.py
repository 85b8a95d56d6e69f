"""
Parser module for graph descriptions.

Turns line-oriented text into nodes and edges while enforcing the line-count
and label-length limits. Each non-blank line declares exactly one entity:

    A               a node
    A B             an edge from A to B
    A B some label  an edge from A to B labelled "some label"
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .models import Edge, Node
from .text import display_length, number_of_lines, tokenize_line

logger = logging.getLogger(__name__)

MAX_LINES = 50
MAX_LABEL_LENGTH = 10


class GraphSyntaxError(Exception):
    """Raised when input text cannot be turned into a graph."""

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.line_number = line_number


class TooManyLinesError(GraphSyntaxError):
    """Raised when the input has more lines than allowed."""

    def __init__(self, line_count: int, max_lines: int = MAX_LINES):
        super().__init__(
            f"Input has {line_count} lines, the limit is {max_lines}"
        )
        self.line_count = line_count
        self.max_lines = max_lines


class LabelTooLongError(GraphSyntaxError):
    """Raised when a node name, endpoint or edge label is too long."""

    def __init__(
        self, label: str, line_number: int, max_length: int = MAX_LABEL_LENGTH
    ):
        super().__init__(
            f"Line {line_number}: '{label}' is longer than "
            f"{max_length} characters",
            line_number,
        )
        self.label = label
        self.max_length = max_length


@dataclass
class ParseResult:
    """Result of parsing input text."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


class Parser:
    """Parses graph description text into nodes and edges."""

    def __init__(
        self, max_lines: int = MAX_LINES, max_label_length: int = MAX_LABEL_LENGTH
    ):
        self.max_lines = max_lines
        self.max_label_length = max_label_length

    def parse(self, input_text: str) -> ParseResult:
        """
        Parse input text into nodes and edges.

        Args:
            input_text: Lines separated by ``"\\n"``. Blank lines are skipped.

        Returns:
            ParseResult with one entity per non-blank line, in input order.

        Raises:
            TooManyLinesError: If the input has more than ``max_lines`` lines.
            LabelTooLongError: If any token is longer than ``max_label_length``
                grapheme clusters. Parsing stops at the first offending line.
        """
        line_count = number_of_lines(input_text)
        if line_count > self.max_lines:
            raise TooManyLinesError(line_count, self.max_lines)

        result = ParseResult()
        for line_num, line in enumerate(input_text.split("\n"), 1):
            tokens = tokenize_line(line)
            if not tokens:
                continue
            logger.debug("line %d tokens: %r", line_num, tokens)

            self._check_lengths(tokens, line_num)

            if len(tokens) == 1:
                result.nodes.append(Node(tokens[0]))
            elif len(tokens) == 2:
                result.edges.append(Edge(tokens[0], tokens[1]))
            elif len(tokens) == 3:
                result.edges.append(Edge(tokens[0], tokens[1], tokens[2]))

        return result

    def _check_lengths(self, tokens: List[str], line_num: int) -> None:
        """Raise LabelTooLongError for the longest token if it is over the limit."""
        longest = max(tokens, key=display_length)
        if display_length(longest) > self.max_label_length:
            raise LabelTooLongError(longest, line_num, self.max_label_length)


def parse_graph(input_text: str) -> ParseResult:
    """
    Convenience function to parse graph input with the default limits.

    Args:
        input_text: Multi-line graph description

    Returns:
        ParseResult with nodes and edges
    """
    parser = Parser()
    return parser.parse(input_text)
