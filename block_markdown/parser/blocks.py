"""Block-level parsing: partition a line array into block records."""

from __future__ import annotations

import logging
import re
from typing import Callable, Sequence

from block_markdown.models import (
    Block,
    CodeBlock,
    HeadlineBlock,
    HorizontalRuleBlock,
    HtmlBlock,
    ListBlock,
    ListItem,
    ListKind,
    ParagraphBlock,
    QuoteBlock,
    ReferenceBlock,
)

from .classifier import REFERENCE_PATTERN, LineKind, classify, html_tag_name, is_blank
from .context import ParseContext

logger = logging.getLogger(__name__)

ConsumeResult = tuple[Block, int]
Consumer = Callable[[Sequence[str], int, ParseContext], ConsumeResult]

_LIST_ITEM_PATTERNS: dict[ListKind, re.Pattern[str]] = {
    ListKind.ORDERED: re.compile(r" {0,3}\d+\.\s+"),
    ListKind.UNORDERED: re.compile(r" {0,3}[-+*]\s+"),
}
_LIST_LINE_KINDS: dict[ListKind, LineKind] = {
    ListKind.ORDERED: LineKind.ORDERED_LIST,
    ListKind.UNORDERED: LineKind.UNORDERED_LIST,
}
_REFERENCE_TITLE_PATTERN = re.compile(r"\s+[('\"](.+?)[)'\"]\s*$")
# Block kinds that may not interrupt a running paragraph.
_PARAGRAPH_CONTINUATIONS = frozenset({LineKind.PARAGRAPH, LineKind.CODE})


def split_lines(text: str) -> list[str]:
    """Normalise line endings and split ``text`` into a line array."""
    normalised = text.replace("\r\n", "\n").replace("\n\r", "\n").replace("\r", "\n")
    return normalised.rstrip().split("\n") if normalised.strip() else []


def parse_blocks(lines: Sequence[str], context: ParseContext) -> list[Block]:
    """Classify and consume ``lines`` into an ordered list of block records.

    Reference definitions are written to ``context.references`` as a side
    effect and leave a ``ReferenceBlock`` sentinel in the result.
    """
    blocks: list[Block] = []
    index = 0
    count = len(lines)
    while index < count:
        kind = classify(lines, index)
        if kind is LineKind.EMPTY:
            index += 1
            continue
        block, next_index = CONSUMERS[kind](lines, index, context)
        blocks.append(block)
        index = max(next_index, index + 1)
    logger.debug("Parsed %d blocks from %d lines", len(blocks), count)
    return blocks


# ---------------------------------------------------------------------------
# Consumers


def consume_quote(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    content: list[str] = []
    index = start
    while index < len(lines) and not is_blank(lines[index]):
        line = lines[index]
        if line == ">":
            line = ""
        elif line.startswith("> "):
            line = line[2:]
        content.append(line)
        index += 1
    return QuoteBlock(lines=tuple(content)), index


def consume_code(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    content: list[str] = []
    index = start
    while index < len(lines):
        line = lines[index]
        if is_blank(line) and classify(lines, index + 1) is not LineKind.CODE:
            break
        content.append(_strip_code_indent(line))
        index += 1
    return CodeBlock(lines=tuple(content)), index


def _strip_code_indent(line: str) -> str:
    if line.startswith("\t"):
        return line[1:]
    width = len(line) - len(line.lstrip(" "))
    return line[min(width, 4):]


def consume_ordered_list(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:
    return _consume_list(lines, start, context, ListKind.ORDERED)


def consume_unordered_list(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:
    return _consume_list(lines, start, context, ListKind.UNORDERED)


def _consume_list(
    lines: Sequence[str],
    start: int,
    context: ParseContext,  # noqa: ARG001
    kind: ListKind,
) -> ConsumeResult:
    marker = _LIST_ITEM_PATTERNS[kind]
    line_kind = _LIST_LINE_KINDS[kind]
    items: list[list[str]] = []
    lazy: set[int] = set()
    indent = ""

    index = start
    while index < len(lines):
        line = lines[index]
        match = marker.match(line)
        if match is not None and classify(lines, index) is not LineKind.HORIZONTAL_RULE:
            indent = " " * match.end()
            items.append([line[match.end():]])
        elif not items:
            break
        elif is_blank(line):
            # A blank line stays inside the item when the list resumes or the
            # next line is indented to the item's content column.
            following = lines[index + 1] if index + 1 < len(lines) else None
            if classify(lines, index + 1) is line_kind or (
                following is not None and following.startswith(indent)
            ):
                items[-1].append(line)
                lazy.add(len(items) - 1)
            else:
                break
        elif not line.startswith(indent) and classify(lines, index) is LineKind.HORIZONTAL_RULE:
            break
        else:
            if line.startswith(indent):
                line = line[len(indent):]
            elif len(items) - 1 in lazy:
                break
            items[-1].append(line)
        index += 1

    last = len(items) - 1
    if last - 1 in lazy:
        lazy.add(last)

    block = ListBlock(
        kind=kind,
        items=tuple(
            ListItem(lines=tuple(item_lines), lazy=position in lazy)
            for position, item_lines in enumerate(items)
        ),
    )
    return block, index


def consume_headline(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    line = lines[start]
    if line.startswith("#"):
        level = min(len(line) - len(line.lstrip("#")), 6)
        return HeadlineBlock(text=line.strip("# \t"), level=level), start + 1

    level = 1 if lines[start + 1].startswith("=") else 2
    return HeadlineBlock(text=line, level=level), start + 2


def consume_horizontal_rule(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    return HorizontalRuleBlock(), start + 1


def consume_html(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    tag = html_tag_name(lines[start]) or ""
    content: list[str] = []
    level = 0
    index = start
    # An unclosed element runs to the end of input.
    while index < len(lines):
        line = lines[index]
        content.append(line)
        level += line.count(f"<{tag}") - line.count(f"</{tag}>")
        index += 1
        if level <= 0:
            break
    return HtmlBlock(lines=tuple(content)), index


def consume_reference(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:
    labels: list[str] = []
    index = start
    while index < len(lines):
        match = REFERENCE_PATTERN.match(lines[index])
        if match is None:
            break
        label, url, title = match.group(1), match.group(2), match.group(3)
        if title is None and index + 1 < len(lines):
            title_match = _REFERENCE_TITLE_PATTERN.match(lines[index + 1])
            if title_match is not None:
                title = title_match.group(1)
                index += 1
        if url.startswith("<") and url.endswith(">"):
            url = url[1:-1]
        context.references.define(label, url, title)
        labels.append(label.lower())
        index += 1
    return ReferenceBlock(labels=tuple(labels)), index


def consume_paragraph(lines: Sequence[str], start: int, context: ParseContext) -> ConsumeResult:  # noqa: ARG001
    content = [lines[start]]
    index = start + 1
    while index < len(lines) and classify(lines, index) in _PARAGRAPH_CONTINUATIONS:
        content.append(lines[index])
        index += 1
    return ParagraphBlock(lines=tuple(content)), index


CONSUMERS: dict[LineKind, Consumer] = {
    LineKind.QUOTE: consume_quote,
    LineKind.CODE: consume_code,
    LineKind.ORDERED_LIST: consume_ordered_list,
    LineKind.UNORDERED_LIST: consume_unordered_list,
    LineKind.HEADLINE: consume_headline,
    LineKind.HORIZONTAL_RULE: consume_horizontal_rule,
    LineKind.HTML: consume_html,
    LineKind.REFERENCE: consume_reference,
    LineKind.PARAGRAPH: consume_paragraph,
}


__all__ = [
    "CONSUMERS",
    "consume_code",
    "consume_headline",
    "consume_horizontal_rule",
    "consume_html",
    "consume_ordered_list",
    "consume_paragraph",
    "consume_quote",
    "consume_reference",
    "consume_unordered_list",
    "parse_blocks",
    "split_lines",
]
