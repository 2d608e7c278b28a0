"""Horizontal rule block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class HorizontalRuleBlock(Block):
    type: Literal[BlockType.HORIZONTAL_RULE] = Field(default=BlockType.HORIZONTAL_RULE, frozen=True)


__all__ = ["HorizontalRuleBlock"]
