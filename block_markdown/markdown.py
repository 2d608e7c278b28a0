"""Markdown text to HTML conversion entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from block_markdown.escaping import escape_html
from block_markdown.exceptions import ResourceLimitExceeded
from block_markdown.models import Block, ReferenceTable
from block_markdown.options import RenderOptions
from block_markdown.parser.blocks import parse_blocks, split_lines
from block_markdown.parser.context import ParseContext
from block_markdown.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParsedDocument:
    """Block records of one document plus the state collected while parsing."""

    blocks: list[Block]
    context: ParseContext
    oversized: bool = False

    @property
    def references(self) -> ReferenceTable:
        return self.context.references


@dataclass(slots=True)
class Markdown:
    """Reusable converter; every call starts from a fresh reference table."""

    options: RenderOptions = field(default_factory=RenderOptions)
    renderer: HtmlRenderer = field(default_factory=HtmlRenderer)

    def parse(self, source: str) -> ParsedDocument:
        context = ParseContext(options=self.options)
        limit = self.options.max_input_length
        if limit is not None and len(source) > limit:
            context.record_limit(
                ResourceLimitExceeded(
                    f"Input length {len(source)} exceeds the limit of {limit} characters.",
                    limit="max_input_length",
                    value=limit,
                )
            )
            return ParsedDocument(blocks=[], context=context, oversized=True)
        return ParsedDocument(blocks=parse_blocks(split_lines(source), context), context=context)

    def render(self, source: str) -> str:
        """Convert ``source`` to an HTML fragment.

        Never fails on malformed markup. Raises ``ResourceLimitExceeded`` only
        when ``options.raise_on_limit`` is set and a limit was reached; the
        exception carries the best-effort output.
        """
        document = self.parse(source)
        context = document.context
        if document.oversized:
            output = escape_html(source)
        else:
            try:
                output = self.render_document(document)
            except RecursionError:
                # The interpreter ran out of stack before max_depth was reached.
                context.record_limit(
                    ResourceLimitExceeded(
                        "Interpreter recursion limit reached before the nesting depth limit.",
                        limit="max_depth",
                        value=self.options.max_depth,
                    )
                )
                output = escape_html(source)

        if context.limit_exceeded and self.options.raise_on_limit:
            first = context.limit_errors[0]
            raise ResourceLimitExceeded(
                first.message,
                limit=first.limit,
                value=first.value,
                partial_output=output,
            )
        return output

    def render_document(self, document: ParsedDocument) -> str:
        return self.renderer.render_blocks(document.blocks, context=document.context)


def parse_document(source: str, *, options: RenderOptions | None = None) -> ParsedDocument:
    """Return the block records and reference table for ``source``."""
    return Markdown(options=options or RenderOptions()).parse(source)


def render(source: str, *, html5: bool | None = None, options: RenderOptions | None = None) -> str:
    """Convert Markdown ``source`` to HTML.

    An explicit ``html5`` overrides the flag carried by ``options``.
    """
    opts = options or RenderOptions()
    if html5 is not None and html5 != opts.html5:
        opts = replace(opts, html5=html5)
    return Markdown(options=opts).render(source)


def render_path(path: str | Path, *, options: RenderOptions | None = None) -> str:
    """Read Markdown from disk and convert it to HTML."""
    content = Path(path).read_text(encoding="utf-8")
    logger.debug("Rendering %s (%d characters)", path, len(content))
    return render(content, options=options)


__all__ = ["Markdown", "ParsedDocument", "parse_document", "render", "render_path"]
