"""Input pulls and output sinks for the transcoders.

WHY: Transcoders must not write to the process's stdout directly. Tests
capture output in memory, and the CLI maps write failures to an exit
status. An explicit sink parameter covers both. Reads go through one
helper so short reads and read errors are handled the same way
everywhere.

HOW: Sink is an ABC with write() and flush(). StreamSink wraps a binary
file object and converts OSError into OutputWriteFailure. MemorySink
accumulates bytes. pull_bytes() reads up to N bytes, topping up short
reads until N bytes or end of stream, and converts OSError into
InputReadFailure.

RULES:
- Sinks accept bytes only; text is encoded by the caller
- pull_bytes returns b"" only at end of stream
- Errors are raised with ``from exc`` so the OSError stays attached
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from stream_embed.core.errors import InputReadFailure, OutputWriteFailure


class Sink(ABC):
    """Forward-only destination for generated source text."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Append ``data`` to the sink. Raises OutputWriteFailure on error."""

    def flush(self) -> None:
        """Push buffered data to the underlying device, if any."""


class StreamSink(Sink):
    """Sink over a binary file object such as ``sys.stdout.buffer``."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        try:
            self._stream.write(data)
        except OSError as exc:
            raise OutputWriteFailure(str(exc)) from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise OutputWriteFailure(str(exc)) from exc


class MemorySink(Sink):
    """Sink that keeps everything written to it in memory."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def text(self) -> str:
        """Return the collected output decoded as latin-1 (lossless for bytes)."""
        return self._buffer.decode("latin-1")


def pull_bytes(source: BinaryIO, size: int, bytes_read: int = 0) -> bytes:
    """Read up to ``size`` bytes from ``source``.

    WHY: Block boundaries in binary mode must fall every ``size`` bytes
    regardless of how the OS splits pipe reads, so a short read is not
    treated as a block boundary.

    HOW: Keeps calling ``source.read`` until ``size`` bytes have been
    collected or a read returns nothing.

    Args:
        source: Binary file object opened for reading.
        size: Maximum number of bytes to return.
        bytes_read: Bytes consumed so far, reported in InputReadFailure.

    Returns:
        Between 1 and ``size`` bytes, or b"" at end of stream.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        try:
            chunk = source.read(remaining)
        except OSError as exc:
            got = size - remaining
            raise InputReadFailure(str(exc), bytes_read=bytes_read + got) from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)
