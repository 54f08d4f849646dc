"""Input source filtering and whole-file reading.

Responsibilities:
- Decide which named inputs are accepted for processing.
- Read accepted files and standard input fully into memory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

VALID_SUFFIX = ".txt"


def is_valid_source(name: str) -> bool:
    """Return whether an input name carries the accepted `.txt` suffix."""

    return str(name).endswith(VALID_SUFFIX)


def read_source_text(name: str, encoding: str = "utf-8") -> str:
    """Read a whole source file.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid for `encoding`.
    """

    return Path(name).read_text(encoding=encoding)


def read_stream_lines(stream: TextIO) -> list[str]:
    """Read every line from a text stream without trailing newlines."""

    return [line.rstrip("\r\n") for line in stream]
