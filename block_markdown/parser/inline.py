"""Inline parsing: turn the text of a leaf block into an HTML fragment.

The dispatcher scans for the next trigger string, hands the text and the
trigger position to that trigger's handler, and appends the returned fragment.
Text between triggers is copied verbatim. Every handler consumes at least one
character, falling back to the literal trigger when its pattern does not match.
"""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

from block_markdown.escaping import escape_html
from block_markdown.exceptions import ResourceLimitExceeded

from .context import ParseContext


class InlineMatch(NamedTuple):
    html: str
    length: int


InlineHandler = Callable[[str, int, ParseContext], InlineMatch]

ESCAPABLE_CHARACTERS = frozenset("\\`*_{}[]()>#+-.!")

_ENTITY_PATTERN = re.compile(r"&#?\w+;")
_EMAIL_PATTERN = re.compile(r"<([^\s<>]*?@[^\s<>]*?\.\w+?)>")
_URL_PATTERN = re.compile(r"<([a-z]{3,}://.+?)>")
_TAG_PATTERN = re.compile(r"</?\w.*?>")
_INLINE_LINK_PATTERN = re.compile(r"\[([^\[\]\n]+)\]\(\s*([^\s]+?)(?:\s+\"(.*?)\")?\s*\)")
_REFERENCE_LINK_PATTERN = re.compile(r"\[([^\[\]\n]+)\] ?\[([^\[\]\n]*)\]")
_IMAGE_PATTERN = re.compile(r"!\[([^\[\]\n]*)\]\(\s*([^\s]+?)(?:\s+\"(.*?)\")?\s*\)")
_PADDED_CODE_PATTERN = re.compile(r"(`+) (.+?) \1")
_CODE_PATTERN = re.compile(r"`(.+?)`")
_STRONG_PATTERNS = {
    "*": re.compile(r"[*]{2}((?:[^*]|[*][^*]*[*])+?)[*]{2}(?![*])", re.S),
    "_": re.compile(r"__((?:[^_]|_[^_]*_)+?)__(?!_)", re.S),
}
_EMPHASIS_PATTERNS = {
    "*": re.compile(r"[*]((?:[^*]|[*][*][^*]+?[*][*])+?)[*](?![*])", re.S),
    "_": re.compile(r"_((?:[^_]|__[^_]*__)+?)_(?!_)\b", re.S),
}


def render_inline(text: str, context: ParseContext) -> str:
    """Render ``text`` with inline markup expanded.

    Past the configured nesting depth the text is escaped and returned as-is.
    """
    try:
        with context.nested():
            return _render_spans(text, context)
    except ResourceLimitExceeded as exc:
        context.record_limit(exc)
        return escape_html(text)


def _render_spans(text: str, context: ParseContext) -> str:
    output: list[str] = []
    position = 0
    while True:
        match = TRIGGER_PATTERN.search(text, position)
        if match is None:
            output.append(text[position:])
            break
        start = match.start()
        output.append(text[position:start])
        fragment, length = INLINE_HANDLERS[match.group(0)](text, start, context)
        output.append(fragment)
        position = start + max(length, 1)
    return "".join(output)


# ---------------------------------------------------------------------------
# Handlers


def parse_newline(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    return InlineMatch(context.options.void_tag("br") + "\n", 3)


def parse_escape(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    following = text[position + 1 : position + 2]
    if following and following in ESCAPABLE_CHARACTERS:
        return InlineMatch(escape_html(following), 2)
    return InlineMatch("\\", 1)


def parse_entity(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    match = _ENTITY_PATTERN.match(text, position)
    if match is not None:
        return InlineMatch(match.group(0), match.end() - position)
    return InlineMatch("&amp;", 1)


def parse_lt(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    if text.find(">", position) != -1:
        match = _EMAIL_PATTERN.match(text, position)
        if match is not None:
            email = escape_html(match.group(1), quote=True)
            return InlineMatch(f'<a href="mailto:{email}">{email}</a>', match.end() - position)
        match = _URL_PATTERN.match(text, position)
        if match is not None:
            url = escape_html(match.group(1), quote=True)
            return InlineMatch(f'<a href="{url}">{url}</a>', match.end() - position)
        match = _TAG_PATTERN.match(text, position)
        if match is not None:
            return InlineMatch(match.group(0), match.end() - position)
    return InlineMatch("&lt;", 1)


def parse_gt(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    return InlineMatch("&gt;", 1)


def parse_link(text: str, position: int, context: ParseContext) -> InlineMatch:
    match = _INLINE_LINK_PATTERN.match(text, position)
    if match is not None:
        label, url, title = match.group(1), match.group(2), match.group(3)
    else:
        match = _REFERENCE_LINK_PATTERN.match(text, position)
        if match is None:
            return InlineMatch("[", 1)
        label = match.group(1)
        entry = context.references.resolve(match.group(2) or label)
        if entry is None:
            return InlineMatch("[", 1)
        url, title = entry.url, entry.title

    attributes = f' href="{escape_html(url, quote=True)}"'
    if title:
        attributes += f' title="{escape_html(title, quote=True)}"'
    link = f"<a{attributes}>{render_inline(label, context)}</a>"
    return InlineMatch(link, match.end() - position)


def parse_image(text: str, position: int, context: ParseContext) -> InlineMatch:
    """Inline images only; ``![alt][label]`` is left as literal text."""
    match = _IMAGE_PATTERN.match(text, position)
    if match is None:
        return InlineMatch("!", 1)
    alt, src, title = match.group(1), match.group(2), match.group(3)
    attributes = f' src="{escape_html(src, quote=True)}" alt="{escape_html(alt, quote=True)}"'
    if title:
        attributes += f' title="{escape_html(title, quote=True)}"'
    return InlineMatch(context.options.void_tag("img", attributes), match.end() - position)


def parse_code(text: str, position: int, context: ParseContext) -> InlineMatch:  # noqa: ARG001
    match = _PADDED_CODE_PATTERN.match(text, position)
    if match is not None:
        code = match.group(2)
    else:
        match = _CODE_PATTERN.match(text, position)
        if match is None:
            return InlineMatch("`", 1)
        code = match.group(1)
    return InlineMatch(f"<code>{escape_html(code)}</code>", match.end() - position)


def parse_emphasis(text: str, position: int, context: ParseContext) -> InlineMatch:
    marker = text[position]
    if text[position + 1 : position + 2] == marker:
        match = _STRONG_PATTERNS[marker].match(text, position)
        tag = "strong"
    else:
        match = _EMPHASIS_PATTERNS[marker].match(text, position)
        tag = "em"
    if match is None:
        return InlineMatch(marker, 1)
    inner = render_inline(match.group(1), context)
    return InlineMatch(f"<{tag}>{inner}</{tag}>", match.end() - position)


INLINE_HANDLERS: dict[str, InlineHandler] = {
    "  \n": parse_newline,
    "&": parse_entity,
    "![": parse_image,
    "*": parse_emphasis,
    "_": parse_emphasis,
    "<": parse_lt,
    ">": parse_gt,
    "[": parse_link,
    "\\": parse_escape,
    "`": parse_code,
}

# Longest triggers first so "![" wins over a bare "[" scan and "  \n" is whole.
TRIGGER_PATTERN = re.compile(
    "|".join(re.escape(trigger) for trigger in sorted(INLINE_HANDLERS, key=len, reverse=True))
)


__all__ = [
    "ESCAPABLE_CHARACTERS",
    "INLINE_HANDLERS",
    "InlineMatch",
    "TRIGGER_PATTERN",
    "render_inline",
]
