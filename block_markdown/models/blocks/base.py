"""Shared building blocks for typed Markdown block records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    QUOTE = "quote"
    CODE = "code"
    LIST = "list"
    HEADLINE = "headline"
    HORIZONTAL_RULE = "horizontal_rule"
    HTML = "html"
    REFERENCE = "reference"


class Block(BaseModel):
    """Immutable record for one block consumed from the line array."""

    type: BlockType

    model_config = ConfigDict(frozen=True)


__all__ = ["Block", "BlockType"]
