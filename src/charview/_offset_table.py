"""Code-point to byte-offset table for UTF-8 text."""

from __future__ import annotations

from array import array
from bisect import bisect_left
from dataclasses import dataclass
from itertools import accumulate
from typing import Final

# Largest code point encoded in 1, 2 and 3 bytes respectively
_ONE_BYTE_MAX: Final = 0x7F
_TWO_BYTE_MAX: Final = 0x7FF
_THREE_BYTE_MAX: Final = 0xFFFF
_MAX_CODE_POINT: Final = 0x10FFFF


def utf8_width(code_point: int) -> int:
    """Returns the number of bytes UTF-8 uses to encode ``code_point``."""
    if code_point <= _ONE_BYTE_MAX:
        return 1
    if code_point <= _TWO_BYTE_MAX:
        return 2
    if code_point <= _THREE_BYTE_MAX:
        return 3
    assert code_point <= _MAX_CODE_POINT, f"invalid code point {code_point:#x}"
    return 4


@dataclass(frozen=True, slots=True)
class Utf8OffsetTable:
    """Parallel code-point and byte-offset columns for one text.

    Entry ``i`` of ``byte_offsets`` is the byte position where code point
    ``i`` begins. ``byte_length`` is the end sentinel and is never stored
    as an entry.
    """

    code_points: array[int]
    byte_offsets: array[int]
    byte_length: int

    @classmethod
    def build(cls, text: str) -> Utf8OffsetTable:
        """Scans ``text`` once and records where every code point starts.

        Args:
            text: Decoded text whose UTF-8 layout should be tabulated

        Returns:
            A populated table
        """
        code_points = array("I", map(ord, text))

        # Running sum of widths: n + 1 values, the last is the total length
        byte_offsets = array(
            "Q", accumulate(map(utf8_width, code_points), initial=0)
        )
        byte_length = byte_offsets.pop()

        return cls(code_points, byte_offsets, byte_length)

    @property
    def char_count(self) -> int:
        return len(self.code_points)

    @property
    def is_ascii(self) -> bool:
        """True when every code point is a single byte."""
        return self.byte_length == len(self.code_points)

    def char_to_byte(self, char_pos: int) -> int:
        """Converts a character position to a byte position.

        ``char_pos`` may equal ``char_count``, which maps to the end
        sentinel. Callers are responsible for bounds checking.
        """
        if char_pos == len(self.byte_offsets):
            return self.byte_length
        return self.byte_offsets[char_pos]

    def byte_to_char(self, byte_pos: int) -> int | None:
        """Converts a byte position to a character position.

        Returns None when ``byte_pos`` does not fall on the first byte of a
        code point or the end sentinel.
        """
        if byte_pos < 0 or byte_pos > self.byte_length:
            return None

        # Fast path for ASCII-only text
        if self.is_ascii:
            return byte_pos

        if byte_pos == self.byte_length:
            return len(self.byte_offsets)

        char_pos = bisect_left(self.byte_offsets, byte_pos)
        if (
            char_pos == len(self.byte_offsets)
            or self.byte_offsets[char_pos] != byte_pos
        ):
            return None
        return char_pos
