"""Command that demonstrates the soft sequence heap operations."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from softseqheap.build import insert_meld
from softseqheap.heap import SoftSequenceHeap, meld
from softseqheap.witnesses import interval_sort

FIRST_VALUES = [13, 5, 30, 20, 50, 14, 26, 33, 21, 4, 17, 44, 23, 9, 11]
SECOND_VALUES = [1, 2, 6, 7, 23, 7, 18, 16, 70, 66, 3]
BUILD_VALUES = [13, 5, 30, 20, 50, 14, 26, 33, 21, 4, 17, 44, 23, 9]
DELETED_VALUE = 26
CHUNK_SIZE = 2


def _error_rate(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not 0 <= value <= 1:
        raise argparse.ArgumentTypeError("error rate must lie between 0 and 1")
    return value


def _write(text: object) -> None:
    sys.stdout.write(f"{text}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="softseqheap",
        description="Demonstrate insert, extract, delete, meld and sorting by witnesses.",
    )
    parser.add_argument("--eps", type=_error_rate, default=0.8, help="error rate (default 0.8)")
    args = parser.parse_args(argv)
    eps = args.eps

    heap = SoftSequenceHeap(eps)
    heap.insert_all(FIRST_VALUES)
    _write(heap)
    _write(heap.extract_min())
    heap.delete(DELETED_VALUE)
    _write(heap)
    heap.extract_all()

    second = SoftSequenceHeap(eps)
    second.insert_all(SECOND_VALUES)
    _write(meld(heap, second))

    built = insert_meld(BUILD_VALUES, eps, CHUNK_SIZE, dynamic_chunk_size=False)
    _write(built)

    ordered = interval_sort(
        built, eps, len(BUILD_VALUES), randomization=False, prob=75, parallelize=False
    )
    _write(" ".join(str(value) for value in ordered))
    return 0


if __name__ == "__main__":
    sys.exit(main())