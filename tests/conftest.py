from __future__ import annotations

from typing import Callable

import pytest

from block_markdown import Markdown, RenderOptions
from block_markdown.parser import ParseContext
from block_markdown.renderers import HtmlRenderer


@pytest.fixture
def context() -> ParseContext:
    """Fresh parse state with default options."""
    return ParseContext()


@pytest.fixture
def context_factory() -> Callable[..., ParseContext]:
    def _factory(**option_overrides) -> ParseContext:
        return ParseContext(options=RenderOptions(**option_overrides))

    return _factory


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


@pytest.fixture
def markdown() -> Markdown:
    return Markdown()
