"""Abstract base transcoder and run result container.

WHY: The CLI (and any future caller) must be able to run either output
mode generically: construct it with a stream name, hand it a source and
a sink, and get back a summary. This base class fixes that interface.

HOW: BaseTranscoder is an ABC with a ``name`` property and a
``transcode()`` method. TranscodeResult is a plain dataclass summarizing
one run.

RULES:
- Subclasses MUST implement ``name`` and ``transcode()``
- ``transcode()`` consumes the source to end of stream
- All per-run state (line counter, block index) lives inside one
  ``transcode()`` call, never on the instance
- I/O failures propagate as TranscodeError subclasses
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

from stream_embed.core.io import Sink


@dataclass
class TranscodeResult:
    """Summary of one completed transcoding run.

    Attributes:
        mode: Registry key of the transcoder that ran ("ascii", "binary").
        bytes_read: Total input bytes consumed.
        statements: Line statements (ascii) or blocks (binary) emitted.
    """

    mode: str
    bytes_read: int
    statements: int


class BaseTranscoder(ABC):
    """Abstract base for all stream-to-source transcoders.

    To add a new output mode:
    1. Create a new file in transcoders/
    2. Subclass BaseTranscoder
    3. Implement name and transcode()
    4. Register in TRANSCODERS dict in transcoders/__init__.py
    """

    def __init__(self, stream_name: str) -> None:
        # Inserted verbatim; no escaping or validation.
        self.stream_name = stream_name

    @property
    def _stream_name_bytes(self) -> bytes:
        # Surrogate-escaped argv bytes come back out unchanged.
        return os.fsencode(self.stream_name)

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable mode name, e.g. 'ASCII'."""

    @abstractmethod
    def transcode(self, source: BinaryIO, sink: Sink) -> TranscodeResult:
        """Read ``source`` to end of stream and write generated source to ``sink``.

        Args:
            source: Binary file object, read front to back exactly once.
            sink: Destination for the generated source text.

        Returns:
            A TranscodeResult describing the run.

        Raises:
            InputReadFailure: The source could not be read.
            OutputWriteFailure: The sink rejected a write.
        """
