"""Unit tests for the CR/LF line-break state machine.

WHY: Getting CRLF wrong either doubles every line in Windows text or
merges lines in old Mac text. The transition table is small enough to
test exhaustively, without any I/O.

RULES:
- Every (state, byte class) pair is covered
"""

import pytest

from stream_embed.core.linebreak import CR, LF, LineBreakState, advance, is_break_byte


def _count_breaks(data: bytes) -> int:
    state = LineBreakState.NONE
    breaks = 0
    for byte in data:
        state, is_break = advance(state, byte)
        breaks += is_break
    return breaks


class TestTransitionTable:
    """advance() follows the documented table for every state."""

    @pytest.mark.parametrize("state", list(LineBreakState))
    def test_cr_always_breaks(self, state):
        assert advance(state, CR) == (LineBreakState.SAW_CR, True)

    def test_lf_after_cr_is_swallowed(self):
        assert advance(LineBreakState.SAW_CR, LF) == (LineBreakState.NONE, False)

    def test_lf_without_cr_breaks(self):
        assert advance(LineBreakState.NONE, LF) == (LineBreakState.NONE, True)

    @pytest.mark.parametrize("state", list(LineBreakState))
    @pytest.mark.parametrize("byte", [0, 9, ord("a"), ord('"'), 255])
    def test_other_bytes_reset_state(self, state, byte):
        assert advance(state, byte) == (LineBreakState.NONE, False)


class TestBreakCounting:
    """Whole sequences produce the expected number of breaks."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"", 0),
            (b"\n", 1),
            (b"\r", 1),
            (b"\r\n", 1),
            (b"\n\r", 2),
            (b"\r\r\n", 2),
            (b"\r\n\n", 2),
            (b"\r\n\r\n", 2),
            (b"a\rb\nc\r\nd", 3),
            (b"\rx\n", 2),
        ],
    )
    def test_break_count(self, data, expected):
        assert _count_breaks(data) == expected


def test_is_break_byte():
    assert is_break_byte(CR)
    assert is_break_byte(LF)
    assert not is_break_byte(ord("\t"))
