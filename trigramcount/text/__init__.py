"""Text normalization and trigram counting building blocks."""

from .counting import analyze_text, generate_sequence_map, rank_sequences, sliding_window
from .normalizer import TextNormalizer, format_text

__all__ = [
    "TextNormalizer",
    "analyze_text",
    "format_text",
    "generate_sequence_map",
    "rank_sequences",
    "sliding_window",
]
