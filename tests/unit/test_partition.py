"""Unit tests for static work partitioning."""

from __future__ import annotations

import pytest

from trigramcount.parallel.partition import split_into_chunks


def test_split_into_chunks_front_loads_larger_chunks() -> None:
    assert split_into_chunks([1, 2, 3, 4, 5], 2) == [[1, 2, 3], [4, 5]]
    assert split_into_chunks([1, 2, 3, 4, 5], 3) == [[1, 2], [3, 4], [5]]


def test_split_into_chunks_pads_with_empty_chunks_when_workers_exceed_items() -> None:
    assert split_into_chunks(["a.txt", "b.txt"], 4) == [["a.txt"], ["b.txt"], [], []]


def test_split_into_chunks_single_chunk_keeps_everything() -> None:
    assert split_into_chunks(["a", "b", "c"], 1) == [["a", "b", "c"]]


@pytest.mark.parametrize("count", [0, 1, 2, 5, 7, 10, 13])
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 8])
def test_split_into_chunks_covers_input_in_order_and_balances_sizes(
    count: int, workers: int
) -> None:
    items = list(range(count))

    chunks = split_into_chunks(items, workers)
    sizes = [len(chunk) for chunk in chunks]

    assert len(chunks) == workers
    assert [item for chunk in chunks for item in chunk] == items
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)


def test_split_into_chunks_rejects_non_positive_chunk_count() -> None:
    with pytest.raises(ValueError, match="at least 1"):
        split_into_chunks([1, 2], 0)
