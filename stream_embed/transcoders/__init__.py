"""Transcoder registry — one entry per output mode.

WHY: The CLI needs a single lookup to find the transcoder for the
selected output mode. A central dict keeps mode selection free of
if/else chains.

HOW: TRANSCODERS maps mode keys to transcoder *classes* (not instances).
Callers instantiate with the stream name:
``transcoder = TRANSCODERS["binary"]("cout")``.

RULES:
- Keys are the output-mode names used by the CLI ("ascii", "binary")
- Values are BaseTranscoder subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stream_embed.transcoders.ascii_text import AsciiTranscoder
from stream_embed.transcoders.binary_blocks import BinaryTranscoder

if TYPE_CHECKING:
    from stream_embed.transcoders.base import BaseTranscoder

TRANSCODERS: dict[str, type[BaseTranscoder]] = {
    "ascii": AsciiTranscoder,
    "binary": BinaryTranscoder,
}
