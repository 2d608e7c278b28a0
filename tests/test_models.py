from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from block_markdown.models import (
    AnyBlock,
    BlockType,
    HeadlineBlock,
    ListBlock,
    ListItem,
    ReferenceTable,
    block_class_for,
)


def test_headline_level_is_validated():
    with pytest.raises(ValidationError):
        HeadlineBlock(text="x", level=7)
    with pytest.raises(ValidationError):
        HeadlineBlock(text="x", level=0)


def test_blocks_are_frozen():
    block = HeadlineBlock(text="x", level=2)

    with pytest.raises(ValidationError):
        block.level = 3


def test_block_class_lookup():
    assert block_class_for("list") is ListBlock
    assert block_class_for(BlockType.HEADLINE) is HeadlineBlock


def test_any_block_discriminates_on_type():
    adapter = TypeAdapter(AnyBlock)

    block = adapter.validate_python(
        {"type": "list", "kind": "ol", "items": [{"lines": ["one"], "lazy": False}]}
    )

    assert isinstance(block, ListBlock)
    assert block.items == (ListItem(lines=("one",)),)


def test_reference_table_case_folds_and_overwrites():
    table = ReferenceTable()
    table.define("Docs", "http://one.test", "One")
    table.define("DOCS", "http://two.test")

    entry = table.resolve("docs")
    assert entry is not None
    assert entry.url == "http://two.test"
    assert entry.title is None
    assert list(table) == ["docs"]
    assert table["Docs"] == entry
    assert table.resolve("missing") is None
