"""Block and inline parsing."""

from .blocks import CONSUMERS, parse_blocks, split_lines
from .classifier import LineKind, classify
from .context import ParseContext
from .inline import InlineMatch, render_inline

__all__ = [
    "CONSUMERS",
    "InlineMatch",
    "LineKind",
    "ParseContext",
    "classify",
    "parse_blocks",
    "render_inline",
    "split_lines",
]
