"""Pytest configuration and shared fixtures for tg-graphviz tests."""

from io import BytesIO

import pytest
from PIL import Image

from tg_graphviz import Graph


class FakeRenderer:
    """Renderer double that records documents and returns fixed bytes."""

    def __init__(self, data: bytes):
        self.data = data
        self.documents = []

    def render(self, document: str) -> bytes:
        self.documents.append(document)
        return self.data


@pytest.fixture
def simple_input():
    """Three unlabelled edges."""
    return "A B\nB C\nC D"


@pytest.fixture
def labelled_input():
    """Two labelled edges."""
    return "A B Edge1\nB C Edge2"


@pytest.fixture
def nodes_input():
    """Three standalone nodes."""
    return "A\nB\nC"


@pytest.fixture
def graph():
    """Undirected graph with default configuration."""
    return Graph()


@pytest.fixture
def directed_graph():
    """Directed graph using the compact layout."""
    return Graph(directed=True, layout="circo")


@pytest.fixture
def png_bytes():
    """A small real PNG image."""
    buffer = BytesIO()
    Image.new("RGB", (4, 3), "#FFFFFF").save(buffer, "PNG")
    return buffer.getvalue()


@pytest.fixture
def fake_renderer(png_bytes):
    """Renderer double returning a valid PNG."""
    return FakeRenderer(png_bytes)


@pytest.fixture
def make_renderer():
    """Factory for renderer doubles returning arbitrary bytes."""
    return FakeRenderer
