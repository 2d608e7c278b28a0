"""Reference definition sentinel."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class ReferenceBlock(Block):
    """Marks consumed ``[label]: url`` lines; renders to nothing."""

    type: Literal[BlockType.REFERENCE] = Field(default=BlockType.REFERENCE, frozen=True)
    labels: tuple[str, ...] = Field(default_factory=tuple)


__all__ = ["ReferenceBlock"]
