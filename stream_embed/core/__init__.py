"""Core I/O, error, and line-break modules shared by all transcoders.

WHY: Both transcoders read a forward-only input stream and write to a
forward-only sink, and both must report I/O failures the same way. The
core package holds those seams so the transcoders only contain their
formatting logic.

HOW: errors.py defines the failure taxonomy, io.py wraps sources and
sinks, linebreak.py holds the CR/LF state machine used by ascii mode.

RULES:
- Nothing in core knows about a specific output mode's text shape
- All OSError handling for stdin/stdout happens in io.py
"""

from stream_embed.core.errors import InputReadFailure, OutputWriteFailure, TranscodeError
from stream_embed.core.io import MemorySink, Sink, StreamSink, pull_bytes

__all__ = [
    "InputReadFailure",
    "MemorySink",
    "OutputWriteFailure",
    "Sink",
    "StreamSink",
    "TranscodeError",
    "pull_bytes",
]
