"""CR/LF line-break detection as an explicit two-state machine.

WHY: Input text may use CR, LF, or CRLF line endings, possibly mixed.
A CRLF pair must count as one break, not two, while a lone CR and a
lone LF each count as one. Remembering only "was the previous byte a
CR" is enough, and keeping that in an enum makes the transition table
testable without any I/O.

HOW: advance() takes the current state and the next byte and returns
the new state plus whether that byte ends a line.

RULES:
- CR always ends a line and moves to SAW_CR
- LF after CR is swallowed (second half of CRLF) and moves to NONE
- LF in any other state ends a line
- Any other byte moves to NONE and never ends a line
"""

from __future__ import annotations

import enum
from typing import Tuple

CR = 13
LF = 10


class LineBreakState(enum.Enum):
    """Whether the previously consumed byte was a carriage return."""

    NONE = "none"
    SAW_CR = "saw_cr"


def is_break_byte(byte: int) -> bool:
    """Return True for CR or LF, the only bytes that can end a line."""
    return byte == CR or byte == LF


def advance(state: LineBreakState, byte: int) -> Tuple[LineBreakState, bool]:
    """Feed one byte into the line-break state machine.

    Args:
        state: State after the previous byte (NONE at stream start).
        byte: The next input byte (0..255).

    Returns:
        ``(new_state, is_break)`` where ``is_break`` is True when this
        byte terminates the current line.
    """
    if byte == CR:
        return LineBreakState.SAW_CR, True
    if byte == LF:
        return LineBreakState.NONE, state is not LineBreakState.SAW_CR
    return LineBreakState.NONE, False
