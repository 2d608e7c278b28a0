"""List block definitions."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .base import Block, BlockType


class ListKind(str, Enum):
    ORDERED = "ol"
    UNORDERED = "ul"


class ListItem(BaseModel):
    """Lines of one list item with the marker and indent unit stripped.

    A lazy item contains blank-line separated content and is rendered entirely
    through the block pipeline instead of having its leading paragraph inlined.
    """

    lines: tuple[str, ...] = Field(default_factory=tuple)
    lazy: bool = False

    model_config = ConfigDict(frozen=True)


class ListBlock(Block):
    type: Literal[BlockType.LIST] = Field(default=BlockType.LIST, frozen=True)
    kind: ListKind = ListKind.UNORDERED
    items: tuple[ListItem, ...] = Field(default_factory=tuple)


__all__ = ["ListBlock", "ListItem", "ListKind"]
