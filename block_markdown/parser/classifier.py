"""Line classification: which block kind does ``lines[index]`` begin?

Classification is a declarative grammar table. Each leading character maps to
an ordered tuple of ``(predicate, kind)`` rules; the first predicate that holds
wins. Rules shared by every line (ordered lists, Setext headlines) run after the
leading-character rules. Anything left over is a paragraph.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Sequence


class LineKind(str, Enum):
    EMPTY = "empty"
    HTML = "html"
    QUOTE = "quote"
    HORIZONTAL_RULE = "hr"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    HEADLINE = "headline"
    REFERENCE = "reference"
    CODE = "code"
    PARAGRAPH = "paragraph"


# Text-level elements stay in paragraphs and are passed through by the inline parser.
INLINE_HTML_ELEMENTS = frozenset(
    {
        "a", "abbr", "acronym",
        "b", "basefont", "bdo", "big", "br", "button", "blink",
        "cite", "code",
        "del", "dfn",
        "em",
        "font",
        "i", "img", "ins", "input", "iframe",
        "kbd",
        "label", "listing",
        "map", "mark",
        "nobr",
        "object",
        "q",
        "rp", "rt", "ruby",
        "s", "samp", "script", "select", "small", "spacer", "span", "strong", "sub", "sup",
        "tt", "var",
        "u",
        "wbr",
        "time",
    }
)

HTML_TAG_PATTERN = re.compile(r"<([A-Za-z0-9]+)(?=[ >])")
HORIZONTAL_RULE_PATTERN = re.compile(r" {0,3}([-*_])(?:\s*\1){2,}\s*$")
UNORDERED_MARKER_PATTERN = re.compile(r" {0,3}[-+*] ")
ORDERED_MARKER_PATTERN = re.compile(r" {0,3}\d+\. ")
REFERENCE_PATTERN = re.compile(r" {0,3}\[(.+?)\]:\s*(.+?)(?:\s+[('\"](.+?)[)'\"])?\s*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"(?:-+|=+)\s*$")

LinePredicate = Callable[[Sequence[str], int], bool]
LineRule = tuple[LinePredicate, LineKind]


def is_blank(line: str) -> bool:
    return not line.strip()


def html_tag_name(line: str) -> str | None:
    """Return the block-level tag opening ``line``, or None for inline or non-tags."""
    match = HTML_TAG_PATTERN.match(line)
    if match is None:
        return None
    tag = match.group(1)
    if tag.lower() in INLINE_HTML_ELEMENTS:
        return None
    return tag


def _always(lines: Sequence[str], index: int) -> bool:  # noqa: ARG001
    return True


def _is_html(lines: Sequence[str], index: int) -> bool:
    return html_tag_name(lines[index]) is not None


def _is_quote(lines: Sequence[str], index: int) -> bool:
    line = lines[index]
    return len(line) == 1 or line[1] == " "


def _is_horizontal_rule(lines: Sequence[str], index: int) -> bool:
    return HORIZONTAL_RULE_PATTERN.match(lines[index]) is not None


def _is_unordered_list(lines: Sequence[str], index: int) -> bool:
    return UNORDERED_MARKER_PATTERN.match(lines[index]) is not None


def _is_ordered_list(lines: Sequence[str], index: int) -> bool:
    return ORDERED_MARKER_PATTERN.match(lines[index]) is not None


def _is_reference(lines: Sequence[str], index: int) -> bool:
    return REFERENCE_PATTERN.match(lines[index]) is not None


def _is_indented_code(lines: Sequence[str], index: int) -> bool:
    return lines[index].startswith("    ")


def _is_setext_headline(lines: Sequence[str], index: int) -> bool:
    if index + 1 >= len(lines):
        return False
    underline = lines[index + 1]
    return bool(underline) and SETEXT_UNDERLINE_PATTERN.match(underline) is not None


_LIST_MARKER_RULES: tuple[LineRule, ...] = (
    (_is_horizontal_rule, LineKind.HORIZONTAL_RULE),
    (_is_unordered_list, LineKind.UNORDERED_LIST),
)

LEADING_CHARACTER_RULES: dict[str, tuple[LineRule, ...]] = {
    "<": ((_is_html, LineKind.HTML),),
    ">": ((_is_quote, LineKind.QUOTE),),
    "_": ((_is_horizontal_rule, LineKind.HORIZONTAL_RULE),),
    "-": _LIST_MARKER_RULES,
    "+": _LIST_MARKER_RULES,
    "*": _LIST_MARKER_RULES,
    "#": ((_always, LineKind.HEADLINE),),
    "[": ((_is_reference, LineKind.REFERENCE),),
    "\t": ((_always, LineKind.CODE),),
    " ": (
        (_is_indented_code, LineKind.CODE),
        (_is_horizontal_rule, LineKind.HORIZONTAL_RULE),
        (_is_unordered_list, LineKind.UNORDERED_LIST),
        (_is_reference, LineKind.REFERENCE),
    ),
}

FALLBACK_RULES: tuple[LineRule, ...] = (
    (_is_ordered_list, LineKind.ORDERED_LIST),
    (_is_setext_headline, LineKind.HEADLINE),
)


def classify(lines: Sequence[str], index: int) -> LineKind:
    """Return the block kind that ``lines[index]`` would begin.

    Indices past the end of ``lines`` classify as ``EMPTY``.
    """
    if index >= len(lines) or is_blank(lines[index]):
        return LineKind.EMPTY
    rules = LEADING_CHARACTER_RULES.get(lines[index][0], ())
    for predicate, kind in (*rules, *FALLBACK_RULES):
        if predicate(lines, index):
            return kind
    return LineKind.PARAGRAPH


__all__ = [
    "FALLBACK_RULES",
    "INLINE_HTML_ELEMENTS",
    "LEADING_CHARACTER_RULES",
    "LineKind",
    "classify",
    "html_tag_name",
    "is_blank",
]
