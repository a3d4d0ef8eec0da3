"""Selection of the k-th smallest item with the help of a soft sequence heap."""

from __future__ import annotations

import math
from typing import Any, Iterable, MutableSequence

from softseqheap.heap import SoftSequenceHeap

_DEFAULT_EPS = 1 / 3


def partition(elements: MutableSequence[Any], pivot: Any) -> int:
    """Move every element not greater than ``pivot`` to the front, in place.

    Returns how many elements are not greater than ``pivot``.
    """
    boundary = 0
    for index, value in enumerate(elements):
        if value <= pivot:
            elements[boundary], elements[index] = elements[index], elements[boundary]
            boundary += 1
    if boundary < len(elements):
        elements[boundary], elements[-1] = elements[-1], elements[boundary]
    return boundary


def _check(items: list, k: int) -> None:
    if not items:
        raise ValueError("cannot select from no elements")
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie between 1 and {len(items)}")


def select(elements: Iterable[Any], k: int, eps: float = _DEFAULT_EPS) -> Any:
    """Return the ``k``-th smallest element (``k`` counts from 1).

    Each round extracts about ``eps * n`` items from a soft heap, takes the
    largest of them as pivot and keeps only the side that holds the answer.
    The input is not modified.
    """
    items = list(elements)
    _check(items, k)
    while True:
        heap = SoftSequenceHeap(eps)
        heap.insert_all(items)
        count = max(1, math.ceil(eps * len(items)))
        pivot = max(heap.extract_min().real_key for _ in range(count))

        rank = partition(items, pivot)
        smaller = sum(1 for value in items[:rank] if value < pivot)
        if smaller < k <= rank:
            return pivot
        if rank > k:
            items = [value for value in items[:rank] if value < pivot]
        else:
            items = items[rank:]
            k -= rank


def kth_smallest(elements: Iterable[Any], k: int, eps: float = _DEFAULT_EPS) -> Any:
    """Return the ``k``-th smallest element, taking the minimum and maximum directly."""
    items = list(elements)
    _check(items, k)
    if k == 1:
        return min(items)
    if k == len(items):
        return max(items)
    return select(items, k, eps)