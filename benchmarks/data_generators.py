"""
Test text generators for character access benchmarks.

Creates UTF-8 texts with different encoded-width profiles:
- Pure ASCII (1 byte per character)
- Mixed European prose (mostly 1 byte, some 2 byte)
- CJK text (3 bytes per character)
- Emoji-heavy text (many 4 byte characters)
"""

import random
import string

# Seeded so runs compare like with like
_RANDOM = random.Random(1729)

_LATIN_ACCENTED = "àáâäçèéêëìíîïñòóôöùúûüßÀÉÖÜ"
_CJK_RANGE = (0x4E00, 0x9FFF)
_EMOJI_RANGE = (0x1F600, 0x1F64F)
_EMOJI_PROBABILITY = 0.25
_ACCENT_PROBABILITY = 0.1

TEXT_TYPES = ("ascii", "european", "cjk", "emoji_heavy")


def generate_test_text(text_type: str, length: int = 10_000) -> str:
    """Generates a text of ``length`` code points of the specified type."""
    generators = {
        "ascii": _generate_ascii,
        "european": _generate_european,
        "cjk": _generate_cjk,
        "emoji_heavy": _generate_emoji_heavy,
    }

    if text_type not in generators:
        raise ValueError(f"Unknown text type: {text_type}")

    return generators[text_type](length)


def random_ranges(length: int, count: int = 1_000) -> list[tuple[int, int]]:
    """Generates valid half-open ranges over a text of ``length`` characters."""
    ranges = []
    for _ in range(count):
        start = _RANDOM.randint(0, length)
        end = _RANDOM.randint(start, length)
        ranges.append((start, end))
    return ranges


def _generate_ascii(length: int) -> str:
    return "".join(
        _RANDOM.choices(string.ascii_letters + string.digits + " ", k=length)
    )


def _generate_european(length: int) -> str:
    """Generates prose-like text with occasional accented letters."""
    chars = []
    for _ in range(length):
        if _RANDOM.random() < _ACCENT_PROBABILITY:
            chars.append(_RANDOM.choice(_LATIN_ACCENTED))
        else:
            chars.append(_RANDOM.choice(string.ascii_lowercase + " "))
    return "".join(chars)


def _generate_cjk(length: int) -> str:
    return "".join(chr(_RANDOM.randint(*_CJK_RANGE)) for _ in range(length))


def _generate_emoji_heavy(length: int) -> str:
    """Generates chat-like text where a quarter of characters are emoji."""
    chars = []
    for _ in range(length):
        if _RANDOM.random() < _EMOJI_PROBABILITY:
            chars.append(chr(_RANDOM.randint(*_EMOJI_RANGE)))
        else:
            chars.append(_RANDOM.choice(string.ascii_letters + " "))
    return "".join(chars)
