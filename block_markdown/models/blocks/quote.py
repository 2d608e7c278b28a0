"""Quote block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class QuoteBlock(Block):
    """Quoted lines with their ``>`` prefix removed; re-parsed when rendered."""

    type: Literal[BlockType.QUOTE] = Field(default=BlockType.QUOTE, frozen=True)
    lines: tuple[str, ...] = Field(default_factory=tuple)


__all__ = ["QuoteBlock"]
