"""Binary transcoder: fixed-size signed-char arrays plus write calls.

WHY: Arbitrary binary data cannot be embedded as string literals
without exhaustive escaping. Numeric arrays handle every byte value
uniformly and can be reconstructed with ``stream.write(block, size)``.

HOW: Pulls up to BLOCK_SIZE bytes at a time. Each non-empty pull becomes
one block, written to the sink as:

    static const char block0[12] =
    {
       104,  101,  108,  108,  111,   32,  119,  111,  114,  108,  100,   10
    };
    cout.write(block0, 12);

RULES:
- A blank line separates consecutive blocks (none before the first)
- The declared size is the number of bytes actually read (never padded)
- Values are the byte reinterpreted as signed char (0xFF -> -1)
- Each value is right-aligned in a 4-character field
- 16 values per row, two-space indent on every row
- ", " between values on a row, "," at a row end, nothing after the last
- A zero-byte pull ends the stream; no trailing empty block
"""

from __future__ import annotations

import logging
from typing import BinaryIO, List

from stream_embed.config import (
    ARRAY_TYPE,
    BLOCK_PREFIX,
    BLOCK_SIZE,
    ROW_INDENT,
    VALUE_WIDTH,
    VALUES_PER_ROW,
)
from stream_embed.core.io import Sink, pull_bytes
from stream_embed.transcoders.base import BaseTranscoder, TranscodeResult

logger = logging.getLogger(__name__)


def to_signed_char(byte: int) -> int:
    """Reinterpret an unsigned byte (0..255) as a two's-complement signed char."""
    return byte - 256 if byte > 127 else byte


_FIELDS: List[str] = [
    "{:>{width}d}".format(to_signed_char(byte), width=VALUE_WIDTH) for byte in range(256)
]


def format_block(stream_name: bytes, index: int, block: bytes) -> bytes:
    """Render one block as an array declaration followed by its write call.

    Args:
        stream_name: Identifier of the output stream, already encoded;
            copied into the write call unchanged.
        index: Zero-based block number; names the array.
        block: The bytes of this block (1..BLOCK_SIZE of them).

    Returns:
        The generated source as bytes, ending with a newline. Blocks after the
        first start with a blank separator line.
    """
    array_name = "{}{}".format(BLOCK_PREFIX, index)
    size = len(block)

    rows = []
    for start in range(0, size, VALUES_PER_ROW):
        values = [_FIELDS[byte] for byte in block[start:start + VALUES_PER_ROW]]
        rows.append(ROW_INDENT + ", ".join(values))

    lines = []
    if index > 0:
        lines.append("")
    lines.append("{} {}[{}] =".format(ARRAY_TYPE, array_name, size))
    lines.append("{")
    lines.append(",\n".join(rows))
    lines.append("};")
    declaration = ("\n".join(lines) + "\n").encode("ascii")
    write_call = stream_name + ".write({}, {});\n".format(array_name, size).encode("ascii")
    return declaration + write_call


class BinaryTranscoder(BaseTranscoder):
    """Transcoder that turns arbitrary bytes into numeric array blocks."""

    @property
    def name(self) -> str:
        return "Binary"

    def transcode(self, source: BinaryIO, sink: Sink) -> TranscodeResult:
        stream = self._stream_name_bytes
        index = 0
        total = 0

        while True:
            block = pull_bytes(source, BLOCK_SIZE, bytes_read=total)
            if not block:
                break
            total += len(block)
            sink.write(format_block(stream, index, block))
            logger.debug("binary: block %d, %d bytes", index, len(block))
            index += 1

        logger.info("binary: %d bytes in, %d blocks out", total, index)
        return TranscodeResult(mode="binary", bytes_read=total, statements=index)
