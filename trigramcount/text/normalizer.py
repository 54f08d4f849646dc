"""Text normalization stage.

Responsibilities:
- Convert raw text into a canonical, space-separated token stream.
- Keep normalization deterministic and unicode-aware.

Tokens are maximal runs of letters, combining marks, apostrophes, and hyphens.
Everything else becomes a separator. Apostrophes and hyphens inside words
(`isn't`, `state-of-the-art`) survive; apostrophes standing alone between
separators are dropped.
"""

from __future__ import annotations

import regex

_DISALLOWED_CHARACTERS_RE = regex.compile(r"[^\p{L}\p{M}\s'\-]")
_STANDALONE_APOSTROPHE_RE = regex.compile(r"(?:^|\s+)'(?=\s|$)")
_WHITESPACE_RE = regex.compile(r"\s+")


def format_text(text: str) -> str:
    """Normalize raw text for trigram counting.

    Args:
        text: Arbitrary input text, possibly spanning several lines.

    Returns:
        Lowercase tokens joined by single spaces, without leading/trailing space.
    """

    formatted = text.lower().replace("\n", " ")
    formatted = _DISALLOWED_CHARACTERS_RE.sub(" ", formatted)
    formatted = _STANDALONE_APOSTROPHE_RE.sub("", formatted)
    formatted = _WHITESPACE_RE.sub(" ", formatted)
    return formatted.strip()


class TextNormalizer:
    """Normalize raw text into the canonical internal representation."""

    def normalize(self, text: str) -> str:
        """Normalize text for downstream deterministic processing."""

        return format_text(text)

    def normalize_lines(self, lines: list[str]) -> str:
        """Normalize each line independently and join non-empty results with spaces."""

        normalized = (format_text(line) for line in lines)
        return " ".join(line for line in normalized if line)
