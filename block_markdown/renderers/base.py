"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from block_markdown.models import Block
from block_markdown.options import RenderOptions

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from block_markdown.parser.context import ParseContext


class Renderer(Protocol):
    def render(self, block: Block, *, context: "ParseContext") -> str:
        ...

    def render_blocks(self, blocks: Sequence[Block], *, context: "ParseContext") -> str:
        ...

    def render_lines(self, lines: Sequence[str], *, context: "ParseContext") -> str:
        ...


class RendererComponent(Protocol):
    def render(
        self,
        block: Block,
        *,
        engine: Renderer,
        context: "ParseContext",
    ) -> str:
        ...


__all__ = ["RenderOptions", "Renderer", "RendererComponent"]
