"""Soft sequence heaps: an approximate priority queue of pruned sorted sequences."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from softseqheap.sequence import Head, Node, merge_heads, prune


class EmptyHeapError(IndexError):
    """Raised when an item is taken from an empty soft sequence heap."""


@dataclass(frozen=True)
class FindMinResult:
    """The item at the minimum and the key it is currently stored under."""

    real_key: Any
    current_key: Any


@dataclass
class ExtractResult:
    """Outcome of ``extract_min``: the item, its current key and new corruptions."""

    real_key: Any
    current_key: Any
    corruption_set: list = field(default_factory=list)

    def __str__(self) -> str:
        if not self.corruption_set:
            return ""
        items = "".join(f"{item} " for item in self.corruption_set)
        return (
            f"minimum value (maybe corrupted) = {self.real_key}\n"
            f"minimum current_key = {self.current_key}\n"
            f"corrupted items = {{ {items}}}\n"
        )


@dataclass
class WitnessExtractResult:
    """Outcome of ``extract_min_sbw``, used by sorting by witnesses.

    ``corruption_set_size`` is the size of the corruption set the element
    was taken from, or 0 if the element was not corrupted.
    """

    element: Any
    corruption_set_size: int
    corruption_set: list = field(default_factory=list)


def _rank_threshold(eps: float) -> int:
    if not 0 <= eps <= 1:
        raise ValueError("Invalid input")
    if eps == 0:
        # An error rate of zero means sequences are never pruned.
        return sys.maxsize
    return math.ceil(math.log2(1 / eps))


def _should_prune(rank: int, threshold: int) -> bool:
    return rank > threshold and (rank - threshold) % 2 == 0


def _update_suffix_min(head: Head) -> Head:
    """Refresh suffix minima from ``head`` back to the front; return the front."""
    best = head if head.next is None else head.next.suffix_min
    while True:
        if head.sequence[0].key < best.sequence[0].key:
            best = head
        head.suffix_min = best
        if head.prev is None:
            return head
        head = head.prev


def _update_suffix_min_once(head: Head) -> None:
    if head.next is None:
        head.suffix_min = head
        return
    following = head.next.suffix_min
    if following.sequence[0].key < head.sequence[0].key:
        head.suffix_min = following
    else:
        head.suffix_min = head


def _replace_heads(first: Head, second: Head, replacement: Head) -> Head:
    """Put ``replacement`` in the head list where ``first`` and ``second`` were."""
    replacement.prev = first.prev
    replacement.next = second.next
    if second.next is not None:
        second.next.prev = replacement
    if first.prev is not None:
        first.prev.next = replacement
    first.prev = first.next = None
    second.prev = second.next = None
    return replacement


def _append_head(tail: Optional[Head], head: Head) -> Head:
    if tail is None:
        return head
    tail.next = head
    head.prev = tail
    return head


class SoftSequenceHeap:
    """A soft heap whose error rate ``eps`` bounds the share of corrupted items."""

    def __init__(self, eps: float) -> None:
        self.rank_threshold: int = _rank_threshold(eps)
        self.head_list: Optional[Head] = None
        self.lazily_deleted: list = []

    def _heads(self) -> Iterator[Head]:
        head = self.head_list
        while head is not None:
            yield head
            head = head.next

    def insert(self, value: Any) -> None:
        """Insert one item."""
        new_head = Head(sequence=_single(value))
        if self.head_list is not None and self.head_list.prev is None:
            self.head_list.prev = new_head
            new_head.next = self.head_list
        front = new_head
        while front.next is not None and front.rank == front.next.rank:
            merged = merge_heads(front, front.next)
            if _should_prune(merged.rank, self.rank_threshold):
                merged.sequence = prune(merged.sequence)
            front = _replace_heads(front, front.next, merged)
        self.head_list = front
        _update_suffix_min_once(front)

    def insert_all(self, values: Iterable[Any]) -> None:
        """Insert every item of ``values`` in order."""
        for value in values:
            self.insert(value)

    def find_min(self) -> Optional[FindMinResult]:
        """Return the item that the next extraction reports, or None if empty."""
        if self.head_list is None:
            return None
        node = self.head_list.suffix_min.sequence[0]
        if not node.corruption_set:
            return FindMinResult(node.key, node.key)
        return FindMinResult(node.corruption_set.front(), node.key)

    def delete(self, item: Any) -> Optional[list]:
        """Delete ``item``.

        If it is the current minimum it is extracted and the items corrupted
        by that are returned; otherwise it is marked for lazy deletion and
        None is returned.
        """
        if self.head_list is None:
            raise EmptyHeapError("Soft Sequence Heap is empty")
        if self.find_min().real_key != item:
            self.lazily_deleted.append(item)
            return None
        return self.extract_min().corruption_set

    def _remove_head(self, head: Head) -> Optional[Head]:
        previous = head.prev
        if head.prev is None and head.next is None:
            self.head_list = None
        elif head.prev is None:
            head.next.prev = None
            self.head_list = head.next
        elif head.next is None:
            head.prev.next = None
        else:
            head.prev.next = head.next
            head.next.prev = head.prev
        head.prev = head.next = None
        return previous

    def _take_min(self) -> tuple[Any, Any, int, list]:
        if self.head_list is None:
            raise EmptyHeapError("Soft Sequence Heap is empty")
        deleted = self.lazily_deleted
        min_head = self.head_list.suffix_min
        min_node: Node = min_head.sequence[0]

        corruption = min_node.corruption_set
        if corruption:
            size = len(corruption)
            value = corruption.pop_front()
            while corruption and corruption.front() in deleted:
                corruption.pop_front()
            if not corruption and min_node.key in deleted:
                self.extract_min()
            return value, min_node.key, size, []

        witnesses = min_node.witness_set.drain()
        value = min_node.key
        min_head.sequence.popleft()
        corrupted = [item for item in witnesses if item not in deleted]
        if not min_head.sequence:
            previous = self._remove_head(min_head)
            if previous is not None:
                _update_suffix_min(previous)
        else:
            _update_suffix_min(min_head)
        # Drop new minima that were marked for deletion.
        while self.head_list is not None and self.find_min().real_key in deleted:
            corrupted.extend(self.extract_min().corruption_set)
        return value, value, 0, corrupted

    def extract_min(self) -> ExtractResult:
        """Remove the item at the minimum and report newly corrupted items."""
        value, current_key, _, corrupted = self._take_min()
        return ExtractResult(value, current_key, corrupted)

    def extract_min_sbw(self) -> WitnessExtractResult:
        """Like ``extract_min`` but report the size of the corruption set used."""
        value, _, size, corrupted = self._take_min()
        return WitnessExtractResult(value, size, corrupted)

    def extract_all(self) -> list:
        """Extract every item and return them in extraction order."""
        extracted = []
        while self.head_list is not None:
            extracted.append(self.extract_min().real_key)
        return extracted

    def __bool__(self) -> bool:
        return self.head_list is not None

    def __str__(self) -> str:
        text = f"rank threshold = {self.rank_threshold}\n"
        return text + "".join(str(head) for head in self._heads())


def _single(value: Any):
    from collections import deque

    return deque([Node(value)])


def meld(first: SoftSequenceHeap, second: SoftSequenceHeap) -> SoftSequenceHeap:
    """Combine two heaps into one; the inputs are emptied.

    If either heap is empty the other one is returned unchanged.
    """
    if first.head_list is None:
        return second
    if second.head_list is None:
        return first

    melded = SoftSequenceHeap(0.5)
    melded.rank_threshold = first.rank_threshold
    melded.lazily_deleted = first.lazily_deleted + second.lazily_deleted

    left, right = first.head_list, second.head_list
    tail: Optional[Head] = None
    while left is not None and right is not None:
        if left.rank < right.rank:
            tail = _append_head(tail, left)
            left = left.next
        else:
            tail = _append_head(tail, right)
            right = right.next
    rest = right if left is None else left
    tail.next = rest
    rest.prev = tail
    first.head_list = None
    second.head_list = None

    # Only the heads up to one past the interleaved part can share a rank.
    current = tail.next if tail.next is not None else tail
    threshold = melded.rank_threshold
    while current.prev is not None:
        if current.rank == current.prev.rank:
            current = current.prev
            while current.next is not None and current.rank == current.next.rank:
                merged = merge_heads(current, current.next)
                if _should_prune(merged.rank, threshold):
                    merged.sequence = prune(merged.sequence)
                current = _replace_heads(current, current.next, merged)
        _update_suffix_min_once(current)
        if current.prev is None:
            break
        current = current.prev
    _update_suffix_min_once(current)
    melded.head_list = current
    return melded