"""Headline block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class HeadlineBlock(Block):
    type: Literal[BlockType.HEADLINE] = Field(default=BlockType.HEADLINE, frozen=True)
    text: str = ""
    level: int = Field(default=1, ge=1, le=6)


__all__ = ["HeadlineBlock"]
