"""Renderer entry-point wiring HTML components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from block_markdown.escaping import escape_html
from block_markdown.exceptions import ResourceLimitExceeded
from block_markdown.models import Block, BlockType
from block_markdown.parser.blocks import parse_blocks
from block_markdown.parser.context import ParseContext
from block_markdown.renderers.base import Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class HtmlRenderer(Renderer):
    _components: dict[BlockType, RendererComponent] = field(default_factory=_default_components)

    def render(self, block: Block, *, context: ParseContext) -> str:
        component = self._components[block.type]
        return component.render(block, engine=self, context=context)

    def render_blocks(self, blocks: Sequence[Block], *, context: ParseContext) -> str:
        rendered = (self.render(block, context=context) for block in blocks)
        return "\n".join(section for section in rendered if section)

    def render_lines(self, lines: Sequence[str], *, context: ParseContext) -> str:
        """Parse ``lines`` as nested block content and render the result.

        Past the configured nesting depth the lines are escaped and returned
        without further parsing.
        """
        try:
            with context.nested():
                return self.render_blocks(parse_blocks(lines, context), context=context)
        except ResourceLimitExceeded as exc:
            context.record_limit(exc)
            return escape_html("\n".join(lines))


__all__ = ["HtmlRenderer"]
