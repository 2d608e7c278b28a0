"""Exceptions raised by block_markdown.

Malformed markup never raises: it degrades to literal text. The only error
surfaced to callers is a tripped resource limit.

Exception Hierarchy
-------------------
- BlockMarkdownError (base exception)

  - ResourceLimitExceeded (nesting depth or input length over budget)

"""

from __future__ import annotations


class BlockMarkdownError(Exception):
    """Base exception class for all block_markdown errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ResourceLimitExceeded(BlockMarkdownError):
    """Raised when a document exceeds a configured resource budget.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    limit : str
        Name of the tripped option (``"max_depth"`` or ``"max_input_length"``)
    value : int
        The configured bound that was reached
    partial_output : str, optional
        Best-effort HTML produced before (or instead of) full parsing

    """

    def __init__(
        self,
        message: str,
        *,
        limit: str,
        value: int,
        partial_output: str | None = None,
    ):
        super().__init__(message)
        self.limit = limit
        self.value = value
        self.partial_output = partial_output


__all__ = ["BlockMarkdownError", "ResourceLimitExceeded"]
