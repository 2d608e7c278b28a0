"""Code block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class CodeBlock(Block):
    type: Literal[BlockType.CODE] = Field(default=BlockType.CODE, frozen=True)
    lines: tuple[str, ...] = Field(default_factory=tuple)
    language: str | None = None


__all__ = ["CodeBlock"]
