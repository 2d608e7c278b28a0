"""Raw HTML block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class HtmlBlock(Block):
    type: Literal[BlockType.HTML] = Field(default=BlockType.HTML, frozen=True)
    lines: tuple[str, ...] = Field(default_factory=tuple)


__all__ = ["HtmlBlock"]
