"""
Formatting and comparison tests.

Validates that views render as their source text and compare by content.
"""

from charview import CharIndexedText


def test_to_display_string(emoji_view: CharIndexedText) -> None:
    """
    Validates rendering passes the source text through unchanged.
    """
    expected = "0\U0001f6002345678\U0001f600"

    assert emoji_view.to_display_string() == expected
    assert str(emoji_view) == expected
    assert f"{emoji_view}" == expected


def test_format_spec_applies_to_text() -> None:
    """
    Validates format specifications apply to the rendered text.
    """
    view = CharIndexedText("ab")

    assert f"[{view:>4}]" == "[  ab]"
    assert format(view, "*<3") == "ab*"


def test_repr() -> None:
    """
    Validates repr shows the class and the text, shortened when long.
    """
    assert repr(CharIndexedText("abc")) == "CharIndexedText('abc')"

    long_repr = repr(CharIndexedText("x" * 500))
    assert long_repr.startswith("CharIndexedText('xxx")
    assert "..." in long_repr
    assert len(long_repr) < 100


def test_equality_by_content() -> None:
    """
    Validates views compare equal to views and strings with the same text.
    """
    text = "h\xe9llo"

    assert CharIndexedText(text) == CharIndexedText(text)
    assert CharIndexedText(text) == CharIndexedText(text.encode())
    assert CharIndexedText(text) == text
    assert CharIndexedText(text) != CharIndexedText("hello")
    assert CharIndexedText(text) != "hello"
    assert CharIndexedText(text) != 42


def test_hash_consistent_with_equality() -> None:
    """
    Validates equal views and strings hash alike.
    """
    text = "0\U0001f600"

    assert hash(CharIndexedText(text)) == hash(text)
    assert hash(CharIndexedText(text.encode())) == hash(text)
    assert len({CharIndexedText(text), CharIndexedText(text.encode())}) == 1


def test_contains_substring() -> None:
    """
    Validates membership tests search the text.
    """
    view = CharIndexedText("0\U0001f6002345678")

    assert "\U0001f6002" in view
    assert "9" not in view
    assert 2 not in view


def test_bytes_source_text_decoded_on_demand() -> None:
    """
    Validates text access over a bytes source decodes fresh each call.
    """
    view = CharIndexedText("caf\xe9".encode())

    assert view.as_text() == "caf\xe9"
    assert view.as_text() is not view.as_text()
    assert str(view) == "caf\xe9"
    assert "f\xe9" in view
