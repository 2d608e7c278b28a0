"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass

# Deepest max_depth that stays inside the default interpreter recursion limit.
MAX_DEPTH_CEILING = 80


@dataclass(slots=True)
class RenderOptions:
    """Conversion settings.

    ``html5`` only switches the spelling of void elements (``<hr>`` versus
    ``<hr />``). ``max_depth`` bounds nested block re-parsing and inline
    recursion together; ``max_input_length`` bounds the document size in
    characters. A tripped limit renders the affected text literally and, with
    ``raise_on_limit``, raises ``ResourceLimitExceeded`` once conversion ends.
    """

    html5: bool = False
    max_depth: int = 64
    max_input_length: int | None = None
    raise_on_limit: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1.")
        if self.max_depth > MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth cannot exceed {MAX_DEPTH_CEILING}.")
        if self.max_input_length is not None and self.max_input_length < 0:
            raise ValueError("max_input_length cannot be negative.")

    def void_tag(self, tag: str, attributes: str = "") -> str:
        closing = ">" if self.html5 else " />"
        return f"<{tag}{attributes}{closing}"


__all__ = ["MAX_DEPTH_CEILING", "RenderOptions"]
