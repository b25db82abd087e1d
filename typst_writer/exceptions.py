"""Package-specific exception types."""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for errors raised while producing Typst output."""


class SinkWriteError(TranslationError):
    """Raised when the output sink rejects a write.

    This is the only way a translation run can fail: every event has a defined
    behavior, so Markdown input alone never causes an error.

    Args:
        fragment: Text that could not be written.
        reason: Message of the underlying error.
    """

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"Failed to write to the output sink: {reason}")
