"""Paragraph block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class ParagraphBlock(Block):
    type: Literal[BlockType.PARAGRAPH] = Field(default=BlockType.PARAGRAPH, frozen=True)
    lines: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


__all__ = ["ParagraphBlock"]
