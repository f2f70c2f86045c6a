"""Exceptions raised while parsing documentation comments."""

from __future__ import annotations


class SwiftMarkupError(Exception):
    """Base class for swiftmarkup errors."""


class MarkdownSyntaxError(SwiftMarkupError):
    """Raised when comment text (or an extracted description) cannot be parsed as Markdown."""


class InternalStateError(SwiftMarkupError):
    """Raised when the section state machine reaches a state it should never reach.

    This signals a defect in the engine, not bad input.
    """
