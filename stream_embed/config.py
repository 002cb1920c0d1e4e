"""Configuration constants, output-format constants, and .env loading.

WHY: The generated source has a fixed lexical shape (block size, values
per row, field width, element type). Keeping those values as plain
module-level data instead of literals buried in the transcoders makes the
format easy to audit and to adjust in one place.

HOW: python-dotenv loads the .env file on import. Format constants are
module-level values. The few user-facing defaults can be overridden via
environment variables.

RULES:
- BLOCK_SIZE is the maximum number of bytes per binary block (1024)
- VALUES_PER_ROW values are printed per array row (16)
- Each value is right-aligned in a VALUE_WIDTH field (4)
- Every array row starts with ROW_INDENT (two spaces)
- DEFAULT_STREAM_NAME defaults to "cout"
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from stream_embed import __version__

# Load .env from the working directory (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Generated source format
# ---------------------------------------------------------------------------

BLOCK_SIZE = 1024
"""Maximum number of input bytes pulled per binary block."""

TEXT_READ_SIZE = 4096
"""Bytes pulled per read in ascii mode; lines are independent of this."""

VALUES_PER_ROW = 16
VALUE_WIDTH = 4
ROW_INDENT = "  "
ARRAY_TYPE = "static const char"
BLOCK_PREFIX = "block"

LINE_TERMINATOR = "endl"
"""Marker appended to every ascii-mode statement (``<< endl``)."""

# ---------------------------------------------------------------------------
# User-facing defaults
# ---------------------------------------------------------------------------

DEFAULT_STREAM_NAME = os.getenv("STREAM_EMBED_NAME", "cout")
DEFAULT_LEGACY_EOF = os.getenv("STREAM_EMBED_LEGACY_EOF", "false").lower() == "true"
DEFAULT_LOG_LEVEL = os.getenv("STREAM_EMBED_LOG_LEVEL", "WARNING").upper()


def version_text() -> str:
    """Return the version string shown by ``-v``, e.g. ``v2018-05-03``."""
    parts = [int(p) for p in __version__.split(".")[:3]]
    while len(parts) < 3:
        parts.append(0)
    return "v{:04d}-{:02d}-{:02d}".format(*parts)
