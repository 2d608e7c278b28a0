"""Render a Markdown file (or stdin) to an HTML fragment.

Example:
    python scripts/render_markdown.py README.md --html5 > readme.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from block_markdown import Markdown, RenderOptions, ResourceLimitExceeded


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert Markdown to an HTML fragment")
    parser.add_argument(
        "document",
        type=Path,
        nargs="?",
        help="Markdown document to render (reads stdin when omitted).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout.",
    )
    parser.add_argument(
        "--html5",
        action="store_true",
        help="Spell void elements HTML5 style (<hr> instead of <hr />).",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=64,
        help="Maximum nesting depth before content is rendered literally (default 64, at most 80).",
    )
    parser.add_argument(
        "--max-input-length",
        type=int,
        default=None,
        help="Refuse to parse documents longer than this many characters.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when a resource limit is reached.",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("render_markdown")

    try:
        options = RenderOptions(
            html5=args.html5,
            max_depth=args.max_depth,
            max_input_length=args.max_input_length,
            raise_on_limit=args.strict,
        )
    except ValueError as exc:
        logger.error("Invalid options: %s", exc)
        return 2
    if args.document is not None:
        source = args.document.resolve().read_text(encoding="utf-8")
        logger.info("Rendering %s", args.document)
    else:
        source = sys.stdin.read()

    status = 0
    try:
        html = Markdown(options=options).render(source)
    except ResourceLimitExceeded as exc:
        logger.error("%s", exc.message)
        html = exc.partial_output or ""
        status = 2

    if args.output is not None:
        args.output.write_text(html + "\n", encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(html), args.output)
    else:
        sys.stdout.write(html + "\n")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
