"""Failure taxonomy for the transcoders.

WHY: Every byte value is representable by the escaping and formatting
rules, so the only things that can go wrong are I/O failures on either
end. Callers need typed exceptions to tell them apart from programming
errors and to map them to an exit status.

HOW: A common TranscodeError base with two subclasses. Both carry the
underlying OSError as ``__cause__`` (raised with ``from exc``).

RULES:
- Never retried or recovered inside a transcoder
- Output already written before the failure is not rolled back
"""

from __future__ import annotations


class TranscodeError(Exception):
    """Base class for fatal failures during a transcoding run."""


class InputReadFailure(TranscodeError):
    """Raised when the input stream cannot be read.

    RULES:
    - ``bytes_read`` is the number of bytes consumed before the failure
    """

    def __init__(self, message: str, bytes_read: int = 0) -> None:
        self.bytes_read = bytes_read
        super().__init__(f"Input read failed after {bytes_read} bytes: {message}")


class OutputWriteFailure(TranscodeError):
    """Raised when the output sink rejects a write."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Output write failed: {message}")
