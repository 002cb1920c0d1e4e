"""ASCII transcoder: one string-literal write statement per input line.

WHY: Text files are easiest to read and diff when embedded line by line
as ``cout << "..." << endl;`` statements instead of numeric arrays.

HOW: Reads the input in chunks and walks it byte by byte. The CR/LF
state machine from core.linebreak decides where lines end. A counter of
characters written on the current line decides whether a break closes a
literal (``" << endl;``) or emits an empty-line statement
(``cout << endl;``), and whether the next character must first open a
literal (``cout << "``). Output for each chunk is written to the sink as
soon as the chunk is processed.

RULES:
- ``"`` and ``\\`` are preceded by a backslash
- TAB is written as ``\\t``
- Every other non-break byte is written unchanged
- CRLF counts as one break; CR alone and LF alone count as one each
- A non-empty unterminated last line is closed at end of stream
- Empty input produces no output
"""

from __future__ import annotations

import logging
from typing import BinaryIO, List

from stream_embed.config import LINE_TERMINATOR, TEXT_READ_SIZE
from stream_embed.core.io import Sink, pull_bytes
from stream_embed.core.linebreak import LineBreakState, advance, is_break_byte
from stream_embed.transcoders.base import BaseTranscoder, TranscodeResult

logger = logging.getLogger(__name__)

_ESCAPES = {
    0x22: b'\\"',   # double quote
    0x5C: b"\\\\",  # backslash
    0x09: b"\\t",   # horizontal tab
}


def _build_literal_table() -> List[bytes]:
    table = [bytes((value,)) for value in range(256)]
    for value, escaped in _ESCAPES.items():
        table[value] = escaped
    return table


_LITERAL = _build_literal_table()


def escape_line(line: bytes) -> bytes:
    """Escape one line's content (no CR/LF) the way it appears inside a literal."""
    return b"".join(_LITERAL[byte] for byte in line)


class AsciiTranscoder(BaseTranscoder):
    """Transcoder that turns text lines into ``<name> << "..." << endl;``.

    Args:
        stream_name: Identifier of the output stream in generated code.
        legacy_eof_close: When True, the unterminated last line is closed
            with ``<name>" << endl;`` exactly as the original command-line
            tool did. When False (default) it is closed like any other
            line, with ``" << endl;``.
    """

    def __init__(self, stream_name: str, legacy_eof_close: bool = False) -> None:
        super().__init__(stream_name)
        self.legacy_eof_close = legacy_eof_close

    @property
    def name(self) -> str:
        return "ASCII"

    def transcode(self, source: BinaryIO, sink: Sink) -> TranscodeResult:
        stream = self._stream_name_bytes
        terminator = LINE_TERMINATOR.encode("ascii")
        open_literal = stream + b' << "'
        close_literal = b'" << ' + terminator + b";\n"
        empty_line = stream + b" << " + terminator + b";\n"
        eof_close = stream + close_literal if self.legacy_eof_close else close_literal

        state = LineBreakState.NONE
        written = 0  # characters written on the current line
        statements = 0
        total = 0

        while True:
            chunk = pull_bytes(source, TEXT_READ_SIZE, bytes_read=total)
            if not chunk:
                break
            total += len(chunk)

            out = bytearray()
            for byte in chunk:
                state, is_break = advance(state, byte)
                if is_break:
                    out += close_literal if written else empty_line
                    written = 0
                    statements += 1
                elif not is_break_byte(byte):
                    if written == 0:
                        out += open_literal
                    out += _LITERAL[byte]
                    written += 1
            sink.write(bytes(out))

        if written > 0:
            sink.write(eof_close)
            statements += 1

        logger.info("ascii: %d bytes in, %d statements out", total, statements)
        return TranscodeResult(mode="ascii", bytes_read=total, statements=statements)
