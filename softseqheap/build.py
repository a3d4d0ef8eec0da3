"""Build a soft sequence heap from chunks that are filled separately and then melded."""

from __future__ import annotations

import os
from typing import Any, Iterable, Sequence

from softseqheap.heap import SoftSequenceHeap, meld

_MIN_DYNAMIC_CHUNK = 2**5 - 1


def meld_all(heaps: Iterable[SoftSequenceHeap]) -> SoftSequenceHeap:
    """Meld heaps pairwise, round after round, until one heap is left.

    In each round neighbours are melded in pairs; with an odd count the last
    heap is carried over to the next round unchanged.
    """
    round_heaps = list(heaps)
    if not round_heaps:
        raise ValueError("no heaps to meld")
    while len(round_heaps) > 1:
        melded = [meld(left, right) for left, right in zip(round_heaps[::2], round_heaps[1::2])]
        if len(round_heaps) % 2 == 1:
            melded.append(round_heaps[-1])
        round_heaps = melded
    return round_heaps[0]


def _heap_of(values: Sequence[Any], eps: float) -> SoftSequenceHeap:
    heap = SoftSequenceHeap(eps)
    heap.insert_all(values)
    return heap


def insert_meld(
    values: Iterable[Any],
    eps: float,
    chunk_size: int = 1,
    dynamic_chunk_size: bool = False,
) -> SoftSequenceHeap:
    """Split ``values`` into chunks, build a heap per chunk and meld them all.

    With ``dynamic_chunk_size`` the chunk size is derived from the number of
    processors, but is never below 31. The last chunk takes every value that
    is left over after the full chunks.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot build a heap from no values")
    if dynamic_chunk_size:
        workers = os.cpu_count() or 1
        chunk_size = max(len(items) // workers, _MIN_DYNAMIC_CHUNK)
    if chunk_size < 1:
        raise ValueError("chunk size must be positive")
    chunk_size = min(chunk_size, len(items))

    count = len(items) // chunk_size
    heaps = [
        _heap_of(items[index * chunk_size:(index + 1) * chunk_size], eps)
        for index in range(count - 1)
    ]
    heaps.append(_heap_of(items[(count - 1) * chunk_size:], eps))
    return meld_all(heaps)