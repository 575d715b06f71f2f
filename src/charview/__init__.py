"""
Character-indexed views over immutable UTF-8 text buffers.

Builds a code-point to byte-offset table once per text so that character
lookups and character-range slices never re-scan the underlying buffer.
"""

from __future__ import annotations

import builtins
import logging
import operator
import os
import reprlib
import time
from collections.abc import Buffer
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from typing import SupportsIndex

from charview._offset_table import Utf8OffsetTable
from charview._offset_table import utf8_width

__version__ = "0.1.0"

type CharIndex = SupportsIndex
type TextSource = str | Buffer

logger = logging.getLogger(__name__)

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "CHARVIEW_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during indexing and slicing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars: int = 0) -> None:
            self.func_name = func_name
            self.chars = chars
            self.start_time = 0

        def __enter__(self) -> ProfileContext:
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - arguments are ignored
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> ProfileContext:
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class CharIndexError(IndexError):
    """
    Base class for character-position contract violations.

    Raised when a caller asks for a position or range that the text does
    not have. ``length`` is the code-point count of the text involved.
    """

    def __init__(self, msg: str, length: int) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")

        self.msg = msg
        self.length = length
        super().__init__(msg)


class OutOfRange(CharIndexError):
    """A single character (or byte) position lies outside the text."""

    def __init__(self, index: int, length: int, msg: str = "") -> None:
        self.index = index
        super().__init__(
            msg
            or f"Index ({index}) must be non-negative and less than the "
            f"number of characters in the text ({length})",
            length,
        )


class RangeEndOutOfBounds(CharIndexError):
    """A range end exceeds the number of characters in the text."""

    def __init__(self, end: int, length: int) -> None:
        self.end = end
        super().__init__(
            f"Range end ({end}) must be less than or equal to the number "
            f"of characters in the text ({length})",
            length,
        )


class InvalidRangeOrder(CharIndexError):
    """A range end precedes its start."""

    def __init__(self, start: int, end: int, length: int) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Range end ({end}) must be greater than or equal to "
            f"range start ({start})",
            length,
        )


class CharIndexedText:
    """
    Read-only view of a UTF-8 buffer addressed by code-point position.

    The buffer is referenced, never copied: a bytes-like source is held
    through a read-only memoryview and every slice is decoded from it on
    demand. A ``str`` source is kept as-is alongside its UTF-8 encoding.
    Callers that pass a writable buffer must not mutate it while the view
    is alive. For a bytes-like source the decoded text is not retained, so
    ``as_text()`` and everything built on it (``str()``, ``repr()``,
    hashing, ``in``) decode the whole buffer and cost O(n) per call.

    Construction scans the text once. Afterwards ``character_at`` is a
    table lookup and ``slice`` resolves both bounds to byte offsets with
    two lookups.
    """

    __slots__ = ("_buffer", "_text", "_table")

    _buffer: memoryview
    _text: str | None
    _table: Utf8OffsetTable

    def __init__(self, source: TextSource) -> None:
        if isinstance(source, str):
            text = source
            buffer = memoryview(source.encode("utf-8"))
        elif isinstance(source, Buffer):
            view = memoryview(source)
            if not view.c_contiguous:
                raise TypeError(
                    "source must be str or a C-contiguous bytes-like object"
                )
            buffer = view.cast("B").toreadonly()
            text = str(buffer, "utf-8")
        else:
            raise TypeError(
                "source must be str or a bytes-like object, "
                f"not {type(source).__name__}"
            )

        with ProfileContext("build_offset_table", len(text)):
            table = Utf8OffsetTable.build(text)

        assert table.byte_length == buffer.nbytes

        object.__setattr__(self, "_buffer", buffer)
        # Decoded bytes sources are not retained; slices decode on demand
        object.__setattr__(
            self, "_text", source if isinstance(source, str) else None
        )
        object.__setattr__(self, "_table", table)

        logger.debug(
            "Indexed %d characters over %d bytes",
            table.char_count,
            table.byte_length,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def as_text(self) -> str:
        """Returns the whole text."""
        if self._text is not None:
            return self._text
        return str(self._buffer, "utf-8")

    def as_bytes(self) -> memoryview:
        """Returns the UTF-8 buffer as a read-only view, without copying."""
        return self._buffer

    def length(self) -> int:
        """Returns the number of code points (not bytes) in the text."""
        return self._table.char_count

    def is_ascii(self) -> bool:
        return self._table.is_ascii

    def to_display_string(self) -> str:
        return self.as_text()

    def character_at(self, index: CharIndex) -> str:
        """
        Returns the code point at ``index`` as a one-character string.

        Raises:
            OutOfRange: if ``index`` is negative or not less than the
                number of characters in the text
        """
        return chr(self.code_point_at(index))

    def code_point_at(self, index: CharIndex) -> int:
        """Returns the code point at ``index`` as an integer."""
        index = operator.index(index)
        if index < 0 or index >= self._table.char_count:
            raise OutOfRange(index, self._table.char_count)
        return self._table.code_points[index]

    def byte_offset(self, index: CharIndex) -> int:
        """
        Returns the byte position where code point ``index`` begins.

        ``index`` may equal ``length()``, which yields the byte length of
        the buffer.
        """
        index = operator.index(index)
        length = self._table.char_count
        if index < 0 or index > length:
            raise OutOfRange(
                index,
                length,
                f"Index ({index}) must be non-negative and less than or "
                f"equal to the number of characters in the text ({length})",
            )
        return self._table.char_to_byte(index)

    def char_index(self, byte_pos: CharIndex) -> int:
        """
        Returns the character position whose encoding starts at ``byte_pos``.

        The byte length of the buffer maps to ``length()``. Positions
        inside a multi-byte code point are rejected.
        """
        byte_pos = operator.index(byte_pos)
        char_pos = self._table.byte_to_char(byte_pos)
        if char_pos is None:
            raise OutOfRange(
                byte_pos,
                self._table.char_count,
                f"Byte position ({byte_pos}) is not the start of a character "
                f"in a text of {self._table.byte_length} bytes",
            )
        return char_pos

    def byte_span(self, start: CharIndex, end: CharIndex) -> tuple[int, int]:
        """
        Resolves the code-point range ``[start, end)`` to a byte range.

        Checks are applied in order: the end against the text length, then
        the end against the start. An empty range (``start == end``) is
        valid for every position up to and including ``length()``.

        Raises:
            OutOfRange: if either bound is negative
            RangeEndOutOfBounds: if ``end`` exceeds ``length()``
            InvalidRangeOrder: if ``end`` precedes ``start``
        """
        start = operator.index(start)
        end = operator.index(end)
        length = self._table.char_count

        if start < 0:
            raise OutOfRange(
                start, length, f"Range start ({start}) must be non-negative"
            )
        if end < 0:
            raise OutOfRange(
                end, length, f"Range end ({end}) must be non-negative"
            )
        if end > length:
            raise RangeEndOutOfBounds(end, length)
        if end < start:
            raise InvalidRangeOrder(start, end, length)

        # end == length resolves to the end sentinel, not a table entry
        byte_end = self._table.char_to_byte(end)
        if start == end:
            return byte_end, byte_end
        return self._table.char_to_byte(start), byte_end

    def byte_slice(self, start: CharIndex, end: CharIndex) -> memoryview:
        """Returns the UTF-8 bytes of ``[start, end)`` without copying."""
        byte_start, byte_end = self.byte_span(start, end)
        return self._buffer[byte_start:byte_end]

    def __getitem__(self, key: CharIndex | builtins.slice) -> str:
        if isinstance(key, builtins.slice):
            if key.step is not None:
                raise TypeError(
                    f"{type(self).__name__} does not support a step when "
                    "slicing"
                )
            start = 0 if key.start is None else key.start
            if key.stop is None:
                return self.slice_from(start)
            return self.slice(start, key.stop)
        return self.character_at(key)

    def slice(self, start: CharIndex, end: CharIndex) -> str:
        """
        Returns the text of the code-point range ``[start, end)``.

        Raises:
            OutOfRange: if either bound is negative
            RangeEndOutOfBounds: if ``end`` exceeds ``length()``
            InvalidRangeOrder: if ``end`` precedes ``start``
        """
        with ProfileContext("slice"):
            byte_start, byte_end = self.byte_span(start, end)
            if self._text is not None and self._table.is_ascii:
                return self._text[byte_start:byte_end]
            return str(self._buffer[byte_start:byte_end], "utf-8")

    def slice_from(self, start: CharIndex) -> str:
        """Returns the text from ``start`` to the end."""
        return self.slice(start, self._table.char_count)

    def slice_to(self, end: CharIndex) -> str:
        """Returns the text from the beginning up to ``end``."""
        return self.slice(0, end)

    def __len__(self) -> int:
        return self._table.char_count

    def __iter__(self) -> Iterator[str]:
        return map(chr, self._table.code_points)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, str):
            return False
        return item in self.as_text()

    def __str__(self) -> str:
        return self.as_text()

    def __format__(self, format_spec: str) -> str:
        return format(self.as_text(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({reprlib.repr(self.as_text())})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CharIndexedText):
            return self._buffer == other._buffer
        if isinstance(other, str):
            return self.as_text() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_text())


__all__ = [
    "CharIndex",
    "CharIndexError",
    "CharIndexedText",
    "HotPathStats",
    "InvalidRangeOrder",
    "OutOfRange",
    "ProfileContext",
    "RangeEndOutOfBounds",
    "TextSource",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "utf8_width",
]
