"""Per-document parse state threaded through block and inline parsing."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from block_markdown.exceptions import ResourceLimitExceeded
from block_markdown.models import ReferenceTable
from block_markdown.options import RenderOptions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseContext:
    """State owned by a single conversion.

    A new context (and with it a new reference table) is created for every
    document, so nothing leaks between conversions that share a ``Markdown``
    instance.
    """

    options: RenderOptions = field(default_factory=RenderOptions)
    references: ReferenceTable = field(default_factory=ReferenceTable)
    depth: int = 0
    limit_errors: list[ResourceLimitExceeded] = field(default_factory=list)

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Enter one level of block or inline recursion.

        Raises ``ResourceLimitExceeded`` on entry when ``max_depth`` levels
        are already open.
        """
        limit = self.options.max_depth
        if self.depth >= limit:
            raise ResourceLimitExceeded(
                f"Nesting depth limit of {limit} reached.",
                limit="max_depth",
                value=limit,
            )
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def record_limit(self, error: ResourceLimitExceeded) -> None:
        if not self.limit_errors:
            logger.warning("%s Remaining content is rendered literally.", error.message)
        self.limit_errors.append(error)

    @property
    def limit_exceeded(self) -> bool:
        return bool(self.limit_errors)


__all__ = ["ParseContext"]
