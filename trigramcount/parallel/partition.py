"""Static partitioning of an ordered work list into near-equal chunks."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def split_into_chunks(items: Sequence[T], n: int) -> list[list[T]]:
    """Split `items` into exactly `n` contiguous chunks.

    Each slot takes `ceil(remaining / slots_left)` items from the front, so chunk
    sizes differ by at most one and larger chunks come first. Concatenating the
    chunks in order reproduces `items`. When `n` exceeds `len(items)` the
    trailing chunks are empty.

    Raises:
        ValueError: If `n` is lower than one.
    """

    if n < 1:
        raise ValueError("Number of chunks must be at least 1.")

    chunks: list[list[T]] = []
    position = 0
    for index in range(n):
        remaining = len(items) - position
        size = math.ceil(remaining / (n - index))
        chunks.append(list(items[position : position + size]))
        position += size
    return chunks
