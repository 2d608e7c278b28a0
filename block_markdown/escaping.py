"""HTML escaping used for every piece of untrusted text."""

from __future__ import annotations

import html


def escape_html(text: str, *, quote: bool = False) -> str:
    """Escape ``&``, ``<`` and ``>``; also quotes when ``quote`` is set.

    Attribute values are escaped with ``quote=True``; element content is not.
    """
    return html.escape(text, quote=quote)


__all__ = ["escape_html"]
