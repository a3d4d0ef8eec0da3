"""Nodes, heads and the merge and prune steps of soft sequences."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional

from softseqheap.circular import CircularList


@dataclass(eq=False)
class Node:
    """An element of a soft sequence with its corruption and witness sets."""

    key: Any
    corruption_set: CircularList = field(default_factory=CircularList)
    witness_set: CircularList = field(default_factory=CircularList)


@dataclass(eq=False)
class Head:
    """A soft sequence of a given rank, linked into the heap's head list."""

    sequence: deque = field(default_factory=deque)
    rank: int = 0
    suffix_min: Optional[Head] = field(default=None, repr=False)
    next: Optional[Head] = field(default=None, repr=False)
    prev: Optional[Head] = field(default=None, repr=False)

    def __str__(self) -> str:
        lines = [f"rank {self.rank}: ["]
        count = len(self.sequence)
        for position, node in enumerate(self.sequence, start=1):
            text = f"{node.key} (C={node.corruption_set}, W={node.witness_set})"
            if position != count:
                text += ", "
            lines.append(text)
        lines.append("]")
        return "\n".join(lines) + "\n"


def binary_merge(first: Head, second: Head) -> deque:
    """Merge the sequences of two heads by key; ties favour ``first``."""
    result: deque = deque()
    left, right = first.sequence, second.sequence
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].key > right[j].key:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
    result.extend(list(left)[i:])
    result.extend(list(right)[j:])
    return result


def merge_heads(first: Head, second: Head) -> Head:
    """Merge two heads of equal rank into a new head of the next rank."""
    if first.rank != second.rank:
        raise ValueError("Invalid rank size detected while merging two heads.")
    return Head(sequence=binary_merge(first, second), rank=first.rank + 1)


def prune(sequence: deque) -> deque:
    """Return ``sequence`` with every second inner node pruned away.

    The first and last nodes are always kept. A pruned node's key goes into
    the witness set of the kept node before it and into the corruption set
    of the node after it; its own witness and corruption sets are spliced
    into the kept node before it.
    """
    result: deque = deque()
    last_index = len(sequence) - 1
    entries = iter(enumerate(sequence))
    for index, node in entries:
        if index == 0 or index == last_index:
            result.append(node)
            continue
        keeper = result[-1]
        keeper.witness_set.append(node.key)
        if node.witness_set:
            keeper.witness_set.splice(node.witness_set)
        _, follower = next(entries)
        follower.corruption_set.append(node.key)
        if node.corruption_set:
            keeper.corruption_set.splice(node.corruption_set)
        result.append(follower)
    return result