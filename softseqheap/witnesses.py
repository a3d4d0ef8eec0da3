"""Sorting by witnesses: extract from a soft heap, then repair the corrupted ranges."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from softseqheap.heap import SoftSequenceHeap

Interval = tuple[int, int]


@dataclass
class PresortResult:
    """Items in extraction order and the index ranges that may be out of order."""

    intervals: list[Interval] = field(default_factory=list)
    values: list = field(default_factory=list)

    def __str__(self) -> str:
        values = "".join(f"{value}, " for value in self.values)
        intervals = "".join(f"[{first},{second}], " for first, second in self.intervals)
        return f"Presorted values: {values}\nIntervals: {intervals}\n"


def _drop_covered(intervals: Iterable[Interval]) -> list[Interval]:
    kept: list[Interval] = []
    for first, second in intervals:
        if kept and kept[-1][0] <= first and kept[-1][1] >= second:
            continue
        kept.append((first, second))
    return kept


def remove_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Return the intervals sorted by start, without those covered by another.

    ``[a, b]`` is covered by ``[c, d]`` when ``c <= a`` and ``b <= d``.
    """
    ordered = sorted(intervals, key=lambda interval: interval[0])
    if not ordered:
        return []
    forward = _drop_covered(ordered)
    backward = _drop_covered(reversed(forward))
    backward.reverse()
    return backward


def presorted_intervals(
    heap: SoftSequenceHeap,
    eps: float,
    n: int,
    randomization: bool = False,
    prob: int = 75,
    rng: Optional[random.Random] = None,
) -> PresortResult:
    """Empty ``heap`` and record a range for every corrupted item.

    A corrupted item's range starts where it was first reported corrupted
    and ends at ``min(n - 1, index + eps * n + |corruption set|)``. With
    ``randomization`` each range is kept with probability ``prob`` percent.
    """
    if randomization and rng is None:
        rng = random.Random()
    corrupted: dict = {}
    values: list = []
    intervals: list[Interval] = []
    while heap:
        result = heap.extract_min_sbw()
        for item in result.corruption_set:
            corrupted.setdefault(item, len(values))
        values.append(result.element)
        if result.corruption_set_size != 0 and (
            not randomization or rng.randrange(100) < prob
        ):
            begin = corrupted.setdefault(result.element, 0)
            end = min(n - 1, int(len(values) + eps * n + result.corruption_set_size))
            intervals.append((begin, end))
    return PresortResult(intervals, values)


def _sort_range(values: list, interval: Interval) -> None:
    first, second = interval
    values[first:second + 1] = sorted(values[first:second + 1])


def sort_selected_intervals(result: PresortResult) -> None:
    """Sort the values of every interval in place, one interval after another."""
    for interval in result.intervals:
        _sort_range(result.values, interval)


def sort_selected_intervals_parallel(result: PresortResult) -> None:
    """Sort the intervals in rounds of pairwise disjoint ones; clears the intervals."""
    pending = list(result.intervals)
    while pending:
        disjoint = [pending[0]]
        remaining: list[Interval] = []
        for interval in pending[1:]:
            if disjoint[-1][1] < interval[0]:
                disjoint.append(interval)
            else:
                remaining.append(interval)
        for interval in disjoint:
            _sort_range(result.values, interval)
        pending = remaining
    result.intervals = []


def _sorted_result(
    heap: SoftSequenceHeap,
    eps: float,
    n: int,
    randomization: bool,
    prob: int,
    parallelize: bool,
) -> PresortResult:
    result = presorted_intervals(heap, eps, n, randomization, prob)
    if result.intervals:
        result.intervals = remove_intervals(result.intervals)
        if parallelize:
            sort_selected_intervals_parallel(result)
        else:
            sort_selected_intervals(result)
    return result


def interval_sort(
    heap: SoftSequenceHeap,
    eps: float,
    n: int,
    randomization: bool = False,
    prob: int = 75,
    parallelize: bool = False,
) -> list:
    """Empty ``heap`` and return its items sorted by witnesses."""
    return _sorted_result(heap, eps, n, randomization, prob, parallelize).values


def interval_sort_checksum(
    heap: SoftSequenceHeap,
    eps: float,
    n: int,
    randomization: bool = False,
    prob: int = 75,
    parallelize: bool = False,
):
    """Run ``interval_sort`` and return the sum of the resulting values."""
    return sum(_sorted_result(heap, eps, n, randomization, prob, parallelize).values, 0)