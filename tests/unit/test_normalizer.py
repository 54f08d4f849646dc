"""Unit tests for unicode-aware text normalization."""

from __future__ import annotations

import pytest

from trigramcount.text.normalizer import TextNormalizer, format_text


def test_format_text_removes_punctuation_case_and_newlines() -> None:
    """Punctuation and digits become separators while in-word apostrophes and hyphens stay."""

    raw = (
        "This is a test.\nNew line, (~!@#$$%^&*()_+{}|:<,>.?1;punctuation), "
        "isn't! the white whale's state-of-the-art"
    )

    assert format_text(raw) == (
        "this is a test new line punctuation isn't the white whale's state-of-the-art"
    )


def test_format_text_joins_lines_and_drops_repeated_punctuation() -> None:
    assert format_text("I love\nsandwiches.(I LOVE SANDWICHES!!)") == (
        "i love sandwiches i love sandwiches"
    )


def test_format_text_drops_standalone_apostrophes_only() -> None:
    """Leading/trailing apostrophes attached to words survive; lone ones vanish."""

    assert format_text(" ' isn't 'tis shoes' who's ' ") == "isn't 'tis shoes' who's"


def test_format_text_drops_consecutive_standalone_apostrophes() -> None:
    assert format_text("a ' ' b") == "a b"


def test_format_text_keeps_unicode_letters_and_marks() -> None:
    """Accented letters, precomposed or combining, are part of tokens."""

    assert format_text("Ça, c'est Noël — déjà vu!") == "ça c'est noël déjà vu"
    assert format_text("Cafe\u0301 cr\u00e8me!") == "cafe\u0301 cr\u00e8me"
    assert format_text("CAF\u00c9") == "caf\u00e9"
    assert format_text("daß sie nicht an deine rührt?") == "daß sie nicht an deine rührt"


def test_format_text_collapses_mixed_whitespace() -> None:
    assert format_text("  one\r\n\ttwo    three \n") == "one two three"


@pytest.mark.parametrize("raw", ["", "   ", "\n\n", "123 456", "!!! ... ???"])
def test_format_text_returns_empty_string_without_tokens(raw: str) -> None:
    assert format_text(raw) == ""


@pytest.mark.parametrize(
    "normalized",
    [
        "",
        "one",
        "i love sandwiches i love sandwiches",
        "isn't 'tis shoes' who's",
        "whale-ship state-of-the-art",
        "ça c'est noël",
    ],
)
def test_format_text_is_idempotent_on_normalized_text(normalized: str) -> None:
    assert format_text(normalized) == normalized
    assert format_text(format_text(normalized)) == format_text(normalized)


def test_text_normalizer_normalizes_lines_independently() -> None:
    """Blank or punctuation-only lines contribute no tokens and no extra spaces."""

    normalizer = TextNormalizer()

    assert normalizer.normalize("Hello, World") == "hello world"
    assert normalizer.normalize_lines(["One two", "", "...", "THREE four"]) == (
        "one two three four"
    )
