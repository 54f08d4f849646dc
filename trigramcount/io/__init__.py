"""Input source filtering and reading."""

from .sources import VALID_SUFFIX, is_valid_source, read_source_text, read_stream_lines

__all__ = ["VALID_SUFFIX", "is_valid_source", "read_source_text", "read_stream_lines"]
