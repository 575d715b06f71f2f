"""
Pytest configuration and shared fixtures for charview tests.

Provides immutable sample texts covering every UTF-8 encoded width so that
index and slice tests exercise multi-byte boundaries.
"""

from dataclasses import dataclass

import pytest

import charview

# 10 code points, 16 bytes: digits around two 4-byte emoji
EMOJI_TEXT = "0\U0001f6002345678\U0001f600"


@dataclass(frozen=True)
class TextCase:
    """
    Immutable container for a sample text and its expected layout.

    ``byte_offsets`` lists where each code point starts in the UTF-8
    encoding, computed by hand rather than by the code under test.
    """

    description: str
    text: str
    byte_offsets: tuple[int, ...]

    @property
    def length(self) -> int:
        return len(self.byte_offsets)


TEXT_CASES = [
    TextCase("empty", "", ()),
    TextCase("ascii", "abc", (0, 1, 2)),
    TextCase("two-byte latin", "h\xe9llo", (0, 1, 3, 4, 5)),
    TextCase("three-byte cjk", "日本語", (0, 3, 6)),
    TextCase("emoji", EMOJI_TEXT, (0, 1, 5, 6, 7, 8, 9, 10, 11, 12)),
    TextCase("every width", "a\xe9\u20ac\U0001d11e", (0, 1, 3, 6)),
    TextCase("trailing multi-byte", "xyß", (0, 1, 2)),
    TextCase("combining mark", "e\u0301", (0, 1)),
]


@pytest.fixture(params=TEXT_CASES, ids=lambda case: case.description)
def text_case(request: pytest.FixtureRequest) -> TextCase:
    """Provides each sample text in turn."""
    case: TextCase = request.param
    return case


@pytest.fixture
def emoji_view() -> charview.CharIndexedText:
    """Provides a view over the ten-character emoji sample."""
    return charview.CharIndexedText(EMOJI_TEXT)


@pytest.fixture
def empty_view() -> charview.CharIndexedText:
    return charview.CharIndexedText("")
