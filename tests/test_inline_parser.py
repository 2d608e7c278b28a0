from __future__ import annotations

import pytest

from block_markdown.parser import render_inline
from block_markdown.parser.inline import INLINE_HANDLERS


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("plain text", "plain text"),
        ("`a<b`", "<code>a&lt;b</code>"),
        ("`` a ` b ``", "<code>a ` b</code>"),
        ("`*not* emphasis`", "<code>*not* emphasis</code>"),
        ("unclosed ` tick", "unclosed ` tick"),
        ("\\*literal\\*", "*literal*"),
        ("\\>", "&gt;"),
        ("\\q", "\\q"),
        ("trailing \\", "trailing \\"),
        ("&copy; &#169; & co", "&copy; &#169; &amp; co"),
        ("a < b > c", "a &lt; b &gt; c"),
        ("<b>bold</b>", "<b>bold</b>"),
        ("<user@example.com>", '<a href="mailto:user@example.com">user@example.com</a>'),
        ("<http://example.com/a>", '<a href="http://example.com/a">http://example.com/a</a>'),
        ("*em*", "<em>em</em>"),
        ("_em_", "<em>em</em>"),
        ("**strong**", "<strong>strong</strong>"),
        ("__strong__", "<strong>strong</strong>"),
        ("**bold *inner* text**", "<strong>bold <em>inner</em> text</strong>"),
        ("this_has_underscores", "this_has_underscores"),
        ("a * b", "a * b"),
        ("*a*b*c*", "<em>a</em>b<em>c</em>"),
        ("héllo *wörld* ✓", "héllo <em>wörld</em> ✓"),
        ("a\nb", "a\nb"),
    ],
)
def test_render_inline(context, source: str, expected: str):
    assert render_inline(source, context) == expected


def test_emphasis_count_for_alternating_markers(context):
    assert render_inline("*a*b*c*", context).count("<em>") == 2


def test_hard_line_break(context_factory):
    assert render_inline("line  \nnext", context_factory()) == "line<br />\nnext"
    assert render_inline("line  \nnext", context_factory(html5=True)) == "line<br>\nnext"


def test_inline_link_with_title(context):
    html = render_inline('see [text](http://x.test "Title") here', context)

    assert html == 'see <a href="http://x.test" title="Title">text</a> here'


def test_link_text_is_rendered_inline_and_url_escaped(context):
    html = render_inline("[**bold** link](/u?a=1&b=2)", context)

    assert html == '<a href="/u?a=1&amp;b=2"><strong>bold</strong> link</a>'


def test_reference_link_resolution(context):
    context.references.define("a", "http://x.test", "T")
    context.references.define("site", "http://site.test")

    assert render_inline("[link][a]", context) == '<a href="http://x.test" title="T">link</a>'
    assert render_inline("[link] [A]", context) == '<a href="http://x.test" title="T">link</a>'
    assert render_inline("[Site][]", context) == '<a href="http://site.test">Site</a>'


def test_unresolved_reference_stays_literal(context):
    assert render_inline("[link][a]", context) == "[link][a]"
    assert render_inline("[just brackets]", context) == "[just brackets]"


def test_link_text_stops_at_nested_bracket(context):
    assert render_inline("[a [b](/u)", context) == '[a <a href="/u">b</a>'


def test_unmatched_brackets_stay_literal(context):
    source = "[a" * 8000

    assert render_inline(source, context) == source
    assert render_inline("![a" * 8000, context) == "![a" * 8000


def test_inline_image(context_factory):
    source = '![alt text](/img.png "Pic")'

    assert render_inline(source, context_factory()) == '<img src="/img.png" alt="alt text" title="Pic" />'
    assert render_inline(source, context_factory(html5=True)) == '<img src="/img.png" alt="alt text" title="Pic">'
    assert render_inline("![](/a.png)", context_factory()) == '<img src="/a.png" alt="" />'


def test_reference_style_images_are_not_supported(context):
    context.references.define("logo", "/logo.png")

    html = render_inline("![logo][logo]", context)

    assert "<img" not in html
    assert html == '!<a href="/logo.png">logo</a>'


def test_every_handler_makes_progress(context):
    for trigger, handler in INLINE_HANDLERS.items():
        fragment, length = handler(trigger, 0, context)
        assert length >= 1, trigger
        assert isinstance(fragment, str)


def test_paragraph_text_never_leaks_raw_specials(context):
    html = render_inline("1 < 2 && 3 > 2", context)

    assert html == "1 &lt; 2 &amp;&amp; 3 &gt; 2"


def test_depth_limit_renders_remainder_literally(context_factory):
    context = context_factory(max_depth=1)

    html = render_inline("*a <b>* tail", context)

    assert html == "<em>a &lt;b&gt;</em> tail"
    assert context.limit_exceeded
    assert context.limit_errors[0].limit == "max_depth"
