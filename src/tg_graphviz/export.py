"""
File export functionality for DOT documents.

This module handles exporting generated documents to files:
- DOT files (.dot) - The Graphviz source text
- PNG images - Rendered by Graphviz and decoded with Pillow

The DotExporter class checks that rendered output really is an image before
it is written, so a broken renderer never produces a corrupt .png file.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .render import GraphvizRenderer, Renderer, RenderError


class DotExporter:
    """
    Exports DOT documents to text and image files.

    Attributes:
        renderer: Collaborator used to turn documents into image bytes.
    """

    def __init__(self, renderer: Optional[Renderer] = None):
        """
        Initialize the exporter.

        Args:
            renderer: Renderer for image export. Defaults to GraphvizRenderer.
        """
        self.renderer = renderer or GraphvizRenderer()

    def save_dot(self, document: str, filename: str) -> None:
        """
        Save a DOT document to a text file.

        Args:
            document: The DOT source to save.
            filename: Output filename (should end in .dot or .gv).
        """
        output_path = Path(filename)
        output_path.write_text(document, encoding="utf-8")

    def render_image(self, document: str) -> Image.Image:
        """
        Render a document and decode the result.

        Raises:
            RenderError: If rendering fails or the output is not an image.
        """
        data = self.renderer.render(document)
        try:
            img = Image.open(BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise RenderError("Renderer output is not a valid image") from e
        return img

    def save_png(self, document: str, filename: str) -> None:
        """
        Render a document and save it as a PNG image.

        Args:
            document: The DOT source to render.
            filename: Output filename (should end in .png).

        Example:
            >>> exporter = DotExporter()
            >>> exporter.save_png(graph.to_dot(), "graph.png")
        """
        img = self.render_image(document)
        output_path = Path(filename)
        img.save(output_path, "PNG")
