"""
Rendering through Graphviz.

The core never runs external processes; this module is the collaborator that
turns a DOT document into image bytes for callers that need one.
"""

import logging
from typing import Protocol

import graphviz

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "dot"


class RenderError(Exception):
    """Raised when a DOT document cannot be rendered."""

    pass


class Renderer(Protocol):
    """Anything that turns a DOT document into image bytes."""

    def render(self, document: str) -> bytes: ...


class GraphvizRenderer:
    """
    Renders DOT documents with the Graphviz binaries.

    Attributes:
        engine: Graphviz layout command used to run the document. A
            ``layout`` attribute inside the document still takes precedence.
        output_format: Graphviz output format (e.g. "png", "svg").
    """

    def __init__(self, engine: str = DEFAULT_ENGINE, output_format: str = "png"):
        if engine not in graphviz.ENGINES:
            raise ValueError(f"unknown Graphviz engine: {engine!r}")
        if output_format not in graphviz.FORMATS:
            raise ValueError(f"unknown Graphviz output format: {output_format!r}")
        self.engine = engine
        self.output_format = output_format

    def render(self, document: str) -> bytes:
        """
        Render a DOT document.

        Args:
            document: DOT source text.

        Returns:
            The rendered image bytes.

        Raises:
            RenderError: If Graphviz is not installed, cannot be started or
                rejects the document.
        """
        logger.debug("rendering with %s to %s", self.engine, self.output_format)
        source = graphviz.Source(document, engine=self.engine)
        try:
            data = source.pipe(format=self.output_format, quiet=True)
        except graphviz.ExecutableNotFound as e:
            raise RenderError(
                "Graphviz executable not found. Install Graphviz to enable rendering."
            ) from e
        except graphviz.CalledProcessError as e:
            stderr = e.stderr
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            raise RenderError(
                f"Graphviz exited with status {e.returncode}: {(stderr or '').strip()}"
            ) from e
        except OSError as e:
            raise RenderError(f"Graphviz could not be started: {e}") from e

        logger.debug("rendered %d bytes", len(data))
        return data
