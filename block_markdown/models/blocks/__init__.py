"""Typed block exports and helpers."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from .base import Block, BlockType
from .code import CodeBlock
from .headline import HeadlineBlock
from .html import HtmlBlock
from .list_block import ListBlock, ListItem, ListKind
from .paragraph import ParagraphBlock
from .quote import QuoteBlock
from .reference import ReferenceBlock
from .rule import HorizontalRuleBlock

AnyBlock = Annotated[
    Union[
        ParagraphBlock,
        QuoteBlock,
        CodeBlock,
        ListBlock,
        HeadlineBlock,
        HorizontalRuleBlock,
        HtmlBlock,
        ReferenceBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_CLASS_MAP = {
    BlockType.PARAGRAPH: ParagraphBlock,
    BlockType.QUOTE: QuoteBlock,
    BlockType.CODE: CodeBlock,
    BlockType.LIST: ListBlock,
    BlockType.HEADLINE: HeadlineBlock,
    BlockType.HORIZONTAL_RULE: HorizontalRuleBlock,
    BlockType.HTML: HtmlBlock,
    BlockType.REFERENCE: ReferenceBlock,
}


def block_class_for(block_type: BlockType | str) -> type[Block]:
    normalized = BlockType(block_type) if not isinstance(block_type, BlockType) else block_type
    return BLOCK_CLASS_MAP[normalized]


__all__ = [
    "AnyBlock",
    "Block",
    "BlockType",
    "CodeBlock",
    "HeadlineBlock",
    "HorizontalRuleBlock",
    "HtmlBlock",
    "ListBlock",
    "ListItem",
    "ListKind",
    "ParagraphBlock",
    "QuoteBlock",
    "ReferenceBlock",
    "block_class_for",
]
