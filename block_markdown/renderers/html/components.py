"""HTML renderer component implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from block_markdown.escaping import escape_html
from block_markdown.models import (
    Block,
    BlockType,
    CodeBlock,
    HeadlineBlock,
    HtmlBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from block_markdown.parser.classifier import LineKind, classify
from block_markdown.parser.context import ParseContext
from block_markdown.parser.inline import render_inline
from block_markdown.renderers.base import RendererComponent

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import HtmlRenderer


# ---------------------------------------------------------------------------
# Rendering context & base component


@dataclass(slots=True)
class RenderContext:
    engine: "HtmlRenderer"
    context: ParseContext

    def inline(self, text: str) -> str:
        return render_inline(text, self.context)

    def render_lines(self, lines: Sequence[str]) -> str:
        return self.engine.render_lines(lines, context=self.context)

    def void_tag(self, tag: str, attributes: str = "") -> str:
        return self.context.options.void_tag(tag, attributes)


class BaseComponent(RendererComponent):
    def render(
        self,
        block: Block,
        *,
        engine: "HtmlRenderer",
        context: ParseContext,
    ) -> str:
        ctx = RenderContext(engine=engine, context=context)
        return self.render_block(block, ctx)

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Component implementations


class ParagraphComponent(BaseComponent):
    def render_block(self, block: ParagraphBlock, ctx: RenderContext) -> str:
        return ctx.inline(block.text)


class HeadlineComponent(BaseComponent):
    def render_block(self, block: HeadlineBlock, ctx: RenderContext) -> str:
        tag = f"h{block.level}"
        return f"<{tag}>{ctx.inline(block.text)}</{tag}>"


class QuoteComponent(BaseComponent):
    def render_block(self, block: QuoteBlock, ctx: RenderContext) -> str:
        return f"<blockquote>{ctx.render_lines(block.lines)}</blockquote>"


class CodeComponent(BaseComponent):
    def render_block(self, block: CodeBlock, ctx: RenderContext) -> str:
        css_class = ""
        if block.language:
            css_class = f' class="language-{escape_html(block.language, quote=True)}"'
        code_text = escape_html("\n".join(block.lines) + "\n")
        return f"<pre><code{css_class}>{code_text}</code></pre>"


class ListComponent(BaseComponent):
    def render_block(self, block: ListBlock, ctx: RenderContext) -> str:
        tag = block.kind.value
        sections = [f"<{tag}>\n"]
        for item in block.items:
            lines = list(item.lines)
            body = ""
            if not item.lazy:
                # A tight item starts with an unwrapped run of paragraph lines.
                count = 0
                while count < len(lines) and classify(lines, count) is LineKind.PARAGRAPH:
                    count += 1
                if count:
                    body = ctx.inline("\n".join(lines[:count]))
                    lines = lines[count:]
            if lines:
                body += ctx.render_lines(lines)
            sections.append(f"<li>{body}</li>\n")
        sections.append(f"</{tag}>")
        return "".join(sections)


class HorizontalRuleComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        return ctx.void_tag("hr")


class HtmlComponent(BaseComponent):
    def render_block(self, block: HtmlBlock, ctx: RenderContext) -> str:  # noqa: ARG002
        return "\n".join(block.lines)


class StructuralComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        return ""


DEFAULT_COMPONENTS: dict[BlockType, RendererComponent] = {
    BlockType.PARAGRAPH: ParagraphComponent(),
    BlockType.HEADLINE: HeadlineComponent(),
    BlockType.QUOTE: QuoteComponent(),
    BlockType.CODE: CodeComponent(),
    BlockType.LIST: ListComponent(),
    BlockType.HORIZONTAL_RULE: HorizontalRuleComponent(),
    BlockType.HTML: HtmlComponent(),
    BlockType.REFERENCE: StructuralComponent(),
}


__all__ = [
    "DEFAULT_COMPONENTS",
    "RenderContext",
]
