"""Near-sorting after Chazelle: split extracted items at chunk minima and sort each part."""

from __future__ import annotations

import math
from typing import Any, Iterator, Optional

from softseqheap.heap import ExtractResult, SoftSequenceHeap


def _layout(eps: float, n: int) -> tuple[int, int]:
    """Return the chunk size and the number of chunks for ``n`` items."""
    if n < 1:
        raise ValueError("the number of items must be positive")
    chunk_size = math.ceil(2 * eps * n)
    if chunk_size < 1:
        raise ValueError("the error rate must be positive")
    return chunk_size, math.ceil(n / chunk_size)


def _draws(heap: SoftSequenceHeap, count: Optional[int]) -> Iterator[ExtractResult]:
    """Extract ``count`` items, or every remaining item if ``count`` is None."""
    if count is None:
        while heap:
            yield heap.extract_min()
    else:
        for _ in range(count):
            yield heap.extract_min()


def _chunk_minimum(heap: SoftSequenceHeap, count: Optional[int], extracted: list) -> Any:
    """Extract one chunk into ``extracted`` and return its lower bound.

    The bound is the smallest item that was uncorrupted at the start of the
    chunk's time interval: uncorrupted extractions count, and corrupted ones
    count only if they became corrupted within this chunk.
    """
    first = heap.extract_min()
    extracted.append(first.real_key)
    minimum = first.current_key
    corrupted_in_chunk: list = []
    remaining = None if count is None else count - 1
    for result in _draws(heap, remaining):
        extracted.append(result.real_key)
        if result.real_key != result.current_key:
            if result.real_key in corrupted_in_chunk:
                minimum = min(minimum, result.real_key)
            corrupted_in_chunk.extend(result.corruption_set)
        else:
            minimum = min(minimum, result.real_key)
    return minimum


def find_minima(heap: SoftSequenceHeap, eps: float, n: int) -> tuple[list, list]:
    """Extract every item from ``heap`` in chunks of ``ceil(2 * eps * n)``.

    Returns the lower bound of each chunk and all extracted items in
    extraction order. The last chunk takes whatever is left in the heap.
    """
    chunk_size, chunks = _layout(eps, n)
    extracted: list = []
    minima = [_chunk_minimum(heap, chunk_size, extracted) for _ in range(chunks - 1)]
    minima.append(_chunk_minimum(heap, None, extracted))
    return minima, extracted


def chazelle_sort(heap: SoftSequenceHeap, eps: float, n: int) -> list:
    """Empty ``heap`` and return its items sorted.

    Items are distributed into the disjoint ranges that start at the chunk
    minima, searching downward from the chunk after the one an item was
    extracted in; each range is then sorted on its own. An item below every
    bound goes to the first range.
    """
    chunk_size, chunks = _layout(eps, n)
    minima, extracted = find_minima(heap, eps, n)
    intervals: list[list] = [[] for _ in minima]
    for position, value in enumerate(extracted):
        start = min(1 + position // chunk_size, chunks - 1)
        target = next((k for k in range(start, -1, -1) if value >= minima[k]), 0)
        intervals[target].append(value)
    result: list = []
    for interval in intervals:
        result.extend(sorted(interval))
    return result