"""Top-level package for the block-structured Markdown to HTML converter."""

__version__ = "0.1.0"

from .exceptions import BlockMarkdownError, ResourceLimitExceeded  # noqa: E402
from .markdown import Markdown, ParsedDocument, parse_document, render, render_path  # noqa: E402
from .renderers.base import RenderOptions  # noqa: E402

__all__ = [
    "__version__",
    "BlockMarkdownError",
    "Markdown",
    "ParsedDocument",
    "RenderOptions",
    "ResourceLimitExceeded",
    "parse_document",
    "render",
    "render_path",
]
