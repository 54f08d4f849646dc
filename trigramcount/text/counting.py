"""Trigram counting and ranking.

Responsibilities:
- Slide a three-token window over normalized text and count each sequence.
- Order a frequency table by descending count.

Key public functions:
- `generate_sequence_map`: frequency table for one normalized text.
- `rank_sequences`: ranked `(trigram, count)` pairs.
- `analyze_text`: both steps for one normalized text.
"""

from __future__ import annotations

from collections import Counter, deque
import itertools
from operator import itemgetter
from typing import Iterable, Iterator, Mapping, TypeVar

from ..models.datatypes import RankedSequences

SEQUENCE_LENGTH = 3

T = TypeVar("T")


def sliding_window(iterable: Iterable[T], n: int) -> Iterator[tuple[T, ...]]:
    "Collect data into overlapping fixed-length windows advancing one item at a time."
    # sliding_window('ABCDE', 3) -> ABC BCD CDE
    iterator = iter(iterable)
    window = deque(itertools.islice(iterator, n - 1), maxlen=n)
    for item in iterator:
        window.append(item)
        yield tuple(window)


def tokenize(text: str) -> list[str]:
    """Split normalized text into tokens; empty text has no tokens."""

    if not text:
        return []
    return text.split(" ")


def generate_sequence_map(text: str) -> Counter[str]:
    """Count every three-word sequence in normalized text.

    Windows overlap: each shift by one token yields a new sequence, so a text
    with `L` tokens produces `max(0, L - 2)` occurrences in total.
    """

    sequence_map: Counter[str] = Counter()
    for window in sliding_window(tokenize(text), SEQUENCE_LENGTH):
        sequence_map[" ".join(window)] += 1
    return sequence_map


def rank_sequences(sequence_map: Mapping[str, int]) -> RankedSequences:
    """Return `(sequence, count)` pairs sorted by count, highest first.

    Sequences with equal counts keep the table's insertion order, which for
    `generate_sequence_map` output is order of first occurrence.
    """

    return sorted(sequence_map.items(), key=itemgetter(1), reverse=True)


def analyze_text(text: str) -> RankedSequences:
    """Count and rank the trigrams of already-normalized text."""

    return rank_sequences(generate_sequence_map(text))
