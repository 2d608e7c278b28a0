from __future__ import annotations

from block_markdown.models import (
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


def test_headline_renders_inline_content(renderer, context):
    block = HeadlineBlock(text="Hi *there*", level=3)

    assert renderer.render(block, context=context) == "<h3>Hi <em>there</em></h3>"


def test_paragraph_has_no_wrapper(renderer, context):
    block = ParagraphBlock(lines=("one", "two & three"))

    assert renderer.render(block, context=context) == "one\ntwo &amp; three"


def test_code_block_is_escaped_and_tagged_with_language(renderer, context):
    plain = CodeBlock(lines=("a < b", "", "c"))
    tagged = CodeBlock(lines=("print('hi')",), language="python")

    assert renderer.render(plain, context=context) == "<pre><code>a &lt; b\n\nc\n</code></pre>"
    assert renderer.render(tagged, context=context) == (
        '<pre><code class="language-python">print(\'hi\')\n</code></pre>'
    )


def test_horizontal_rule_spelling_follows_html5_flag(renderer, context_factory):
    assert renderer.render(HorizontalRuleBlock(), context=context_factory()) == "<hr />"
    assert renderer.render(HorizontalRuleBlock(), context=context_factory(html5=True)) == "<hr>"


def test_html_block_passes_through_verbatim(renderer, context):
    block = HtmlBlock(lines=("<div>", "<b>x & y</b>", "</div>"))

    assert renderer.render(block, context=context) == "<div>\n<b>x & y</b>\n</div>"


def test_quote_content_is_parsed_as_blocks(renderer, context):
    block = QuoteBlock(lines=("# Title", "", "body *text*"))

    assert renderer.render(block, context=context) == "<blockquote><h1>Title</h1>\nbody <em>text</em></blockquote>"


def test_tight_list_inlines_leading_paragraph(renderer, context):
    block = ListBlock(
        kind=ListKind.UNORDERED,
        items=(
            ListItem(lines=("one",)),
            ListItem(lines=("two", "  - nested")),
        ),
    )

    assert renderer.render(block, context=context) == (
        "<ul>\n<li>one</li>\n<li>two<ul>\n<li>nested</li>\n</ul></li>\n</ul>"
    )


def test_lazy_list_item_renders_through_block_pipeline(renderer, context):
    block = ListBlock(
        kind=ListKind.ORDERED,
        items=(ListItem(lines=("first", "", "    code"), lazy=True),),
    )

    assert renderer.render(block, context=context) == (
        "<ol>\n<li>first\n<pre><code>code\n</code></pre></li>\n</ol>"
    )


def test_reference_sentinel_renders_nothing(renderer, context):
    blocks = [ParagraphBlock(lines=("a",)), ReferenceBlock(labels=("x",)), ParagraphBlock(lines=("b",))]

    assert renderer.render(ReferenceBlock(), context=context) == ""
    assert renderer.render_blocks(blocks, context=context) == "a\nb"


def test_render_lines_falls_back_to_literal_text_past_depth_limit(renderer, context_factory):
    context = context_factory(max_depth=1)

    html = renderer.render_lines(["# a <b>"], context=context)

    assert html == "<h1>a &lt;b&gt;</h1>"
    assert context.limit_exceeded
