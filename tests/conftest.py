"""Shared test fixtures for the stream_embed test suite.

WHY: Transcoder and CLI tests all need in-memory input streams, sinks
that capture output, and streams that fail on demand.

HOW: Helper classes simulate short reads and I/O errors. Fixtures run a
transcoder over a byte string, or the whole CLI with ``sys.stdin`` and
``sys.stdout`` replaced by in-memory streams.

RULES:
- No test touches the real stdin/stdout
- Transcoders under test are always built with an explicit stream name
"""

import io
import sys
from typing import Callable, List, Optional, Tuple

import pytest

from stream_embed.core.io import MemorySink
from stream_embed.transcoders.ascii_text import AsciiTranscoder
from stream_embed.transcoders.base import TranscodeResult
from stream_embed.transcoders.binary_blocks import BinaryTranscoder


class TrickleReader(io.RawIOBase):
    """Raw stream returning at most ``step`` bytes per read() call."""

    def __init__(self, data: bytes, step: int) -> None:
        self._data = data
        self._pos = 0
        self._step = step

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._data)
        n = min(size, self._step, len(self._data) - self._pos)
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk


class FailingReader(io.RawIOBase):
    """Raw stream that yields ``data`` once, then raises OSError."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = data

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._data:
            chunk, self._data = self._data, b""
            return chunk
        raise OSError(5, "Input/output error")


class FailingWriter(io.RawIOBase):
    """Raw stream whose writes always fail."""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError(28, "No space left on device")


@pytest.fixture
def run_ascii() -> Callable[..., Tuple[bytes, TranscodeResult]]:
    """Run an AsciiTranscoder over ``data``; return (output, result)."""

    def _run(data: bytes, name: str = "out", legacy_eof_close: bool = False):
        sink = MemorySink()
        result = AsciiTranscoder(name, legacy_eof_close=legacy_eof_close).transcode(
            io.BytesIO(data), sink,
        )
        return sink.getvalue(), result

    return _run


@pytest.fixture
def run_binary() -> Callable[..., Tuple[bytes, TranscodeResult]]:
    """Run a BinaryTranscoder over ``data``; return (output, result)."""

    def _run(data: bytes, name: str = "out"):
        sink = MemorySink()
        result = BinaryTranscoder(name).transcode(io.BytesIO(data), sink)
        return sink.getvalue(), result

    return _run


@pytest.fixture
def run_cli(monkeypatch) -> Callable[..., Tuple[int, bytes]]:
    """Run ``stream_embed.cli.main`` with in-memory stdin/stdout.

    Returns (exit_code, stdout_bytes). stderr is left to capsys.
    """
    from stream_embed.cli import main

    def _run(argv: List[str], data: bytes = b"", stdout: Optional[io.RawIOBase] = None):
        fake_stdin = io.TextIOWrapper(io.BytesIO(data))
        raw_out = stdout if stdout is not None else io.BytesIO()
        fake_stdout = io.TextIOWrapper(raw_out, write_through=True)
        monkeypatch.setattr(sys, "stdin", fake_stdin)
        monkeypatch.setattr(sys, "stdout", fake_stdout)
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        if stdout is not None:
            return exc_info.value.code, b""
        fake_stdout.flush()
        return exc_info.value.code, raw_out.getvalue()

    return _run
