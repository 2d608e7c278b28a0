"""Block records and reference table models."""

from .blocks import (
    AnyBlock,
    Block,
    BlockType,
    CodeBlock,
    HeadlineBlock,
    HorizontalRuleBlock,
    HtmlBlock,
    ListBlock,
    ListItem,
    ListKind,
    ParagraphBlock,
    QuoteBlock,
    ReferenceBlock,
    block_class_for,
)
from .references import ReferenceEntry, ReferenceTable

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
    "ReferenceEntry",
    "ReferenceTable",
    "block_class_for",
]
