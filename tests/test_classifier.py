from __future__ import annotations

import pytest

from block_markdown.parser.classifier import (
    LEADING_CHARACTER_RULES,
    LineKind,
    classify,
    html_tag_name,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("<div>", LineKind.HTML),
        ('<section class="note">', LineKind.HTML),
        ("<span>inline</span> text", LineKind.PARAGRAPH),
        ("<a href='x'>link</a>", LineKind.PARAGRAPH),
        ("< div>", LineKind.PARAGRAPH),
        ("> quoted", LineKind.QUOTE),
        (">", LineKind.QUOTE),
        (">not a quote", LineKind.PARAGRAPH),
        ("---", LineKind.HORIZONTAL_RULE),
        ("* * *", LineKind.HORIZONTAL_RULE),
        ("___", LineKind.HORIZONTAL_RULE),
        ("  - - -", LineKind.HORIZONTAL_RULE),
        ("- item", LineKind.UNORDERED_LIST),
        ("+ item", LineKind.UNORDERED_LIST),
        ("* item", LineKind.UNORDERED_LIST),
        ("  - indented item", LineKind.UNORDERED_LIST),
        ("# Title", LineKind.HEADLINE),
        ("[id]: http://example.com", LineKind.REFERENCE),
        ('  [id]: http://example.com "Title"', LineKind.REFERENCE),
        ("\tcode", LineKind.CODE),
        ("    code", LineKind.CODE),
        ("1. first", LineKind.ORDERED_LIST),
        ("  12. twelfth", LineKind.ORDERED_LIST),
        ("1986.", LineKind.PARAGRAPH),
        ("plain text", LineKind.PARAGRAPH),
        ("", LineKind.EMPTY),
        ("   \t ", LineKind.EMPTY),
    ],
)
def test_classify_single_line(line: str, expected: LineKind):
    assert classify([line], 0) is expected


def test_classify_setext_headlines_look_at_next_line():
    assert classify(["Title", "====="], 0) is LineKind.HEADLINE
    assert classify(["Title", "---"], 0) is LineKind.HEADLINE
    assert classify(["Title", "- item"], 0) is LineKind.PARAGRAPH
    assert classify(["Title", ""], 0) is LineKind.PARAGRAPH


def test_classify_past_end_is_empty():
    assert classify(["only"], 1) is LineKind.EMPTY
    assert classify([], 0) is LineKind.EMPTY


def test_rule_takes_priority_over_list_marker():
    first_predicate, first_kind = LEADING_CHARACTER_RULES["-"][0]
    assert first_kind is LineKind.HORIZONTAL_RULE
    assert classify(["- - -"], 0) is LineKind.HORIZONTAL_RULE
    assert classify(["- -"], 0) is LineKind.UNORDERED_LIST


def test_html_tag_name_ignores_inline_elements():
    assert html_tag_name("<div>") == "div"
    assert html_tag_name("<table border=1>") == "table"
    assert html_tag_name("<SPAN>") is None
    assert html_tag_name("<hr/>") is None
    assert html_tag_name("<div") is None
