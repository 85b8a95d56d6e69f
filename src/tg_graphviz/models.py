"""
Data models for graph descriptions.

This module contains the dataclasses produced by the parser and consumed by
the DOT serializer. They carry raw text tokens only; no validation happens
here.

Classes:
    Node: A standalone vertex declared by a single-token line.
    Edge: A connection between two vertices, optionally labelled.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """
    A single named vertex with no explicit edges.

    Attributes:
        label: Vertex name as written in the input.
    """

    label: str


@dataclass(frozen=True)
class Edge:
    """
    A connection between two vertex names.

    Endpoints are not checked against declared nodes; the renderer creates
    any vertex an edge mentions.

    Attributes:
        source: Name of the first endpoint.
        target: Name of the second endpoint.
        label: Edge label. Empty string means no label.
    """

    source: str
    target: str
    label: str = ""
