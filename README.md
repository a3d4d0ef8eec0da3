# softseqheap

A soft sequence heap: a priority queue that trades exactness for speed.
With error rate `eps`, `extract_min` may return an item whose key has been
"corrupted", that is, an item stored under a larger key than its own. Items
that become corrupted are reported, so algorithms built on the heap can
correct for them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The heap

`softseqheap.heap.SoftSequenceHeap(eps)` takes an error rate in `[0, 1]`;
any other value raises `ValueError`. An error rate of 0 means sequences are
never pruned.

```python
from softseqheap.heap import SoftSequenceHeap, meld

heap = SoftSequenceHeap(0.8)
heap.insert_all([13, 5, 30, 20, 50, 14, 26, 33, 21, 4, 17, 44, 23, 9, 11])

result = heap.extract_min()   # ExtractResult(real_key, current_key, corruption_set)
print(result.real_key, result.current_key, result.corruption_set)

heap.delete(26)
print(heap)                   # rank threshold and every sequence with its sets

other = SoftSequenceHeap(0.8)
other.insert_all([1, 2, 6, 7, 23])
combined = meld(heap, other)  # both inputs are emptied
print(combined.extract_all())
```

- `insert(value)` / `insert_all(values)` add items.
- `find_min()` returns a `FindMinResult(real_key, current_key)` for the item
  the next extraction reports, or `None` if the heap is empty.
- `extract_min()` removes that item and returns an `ExtractResult` whose
  `corruption_set` lists the items that became corrupted.
- `extract_min_sbw()` does the same but returns a `WitnessExtractResult`
  carrying `corruption_set_size`, the size of the corruption set the item
  was taken from (0 if it was not corrupted).
- `delete(item)` extracts the item and returns the corrupted items if it is
  the current minimum; otherwise it marks the item for lazy deletion and
  returns `None`. Lazily deleted items are skipped by later extractions.
- `extract_all()` empties the heap and returns the items in extraction order.
- A heap is true while it holds items.
- `meld(first, second)` combines two heaps; if one of them is empty the
  other is returned as it is.

Extracting from or deleting in an empty heap raises `EmptyHeapError`
(a subclass of `IndexError`).

## Algorithms on top of the heap

- `softseqheap.build.insert_meld(values, eps, chunk_size=1, dynamic_chunk_size=False)`
  splits `values` into chunks, builds a heap per chunk and melds them with
  `meld_all(heaps)`, which melds neighbours pairwise round after round.
  With `dynamic_chunk_size` the chunk size is the number of values divided by
  the processor count, but at least 31.
- `softseqheap.selection.kth_smallest(elements, k, eps=1/3)` returns the
  `k`-th smallest element (`k` counts from 1); `select` does the work using
  the heap to find pivots, and `partition` is the in-place partition step.
  Both raise `ValueError` for no elements or `k` out of range.
- `softseqheap.chazelle.chazelle_sort(heap, eps, n)` empties the heap in
  chunks of `ceil(2 * eps * n)` items, takes a lower bound per chunk
  (`find_minima`), distributes the items into the ranges between those
  bounds and sorts each range.
- `softseqheap.witnesses.interval_sort(heap, eps, n, randomization=False, prob=75, parallelize=False)`
  is sorting by witnesses: `presorted_intervals` empties the heap and records
  an index range for every corrupted item, `remove_intervals` drops ranges
  covered by others, and the remaining ranges are sorted in place (one after
  another, or with `parallelize` in rounds of disjoint ranges). Values outside
  every recorded range stay in extraction order. `interval_sort_checksum`
  returns the sum of the result.

```python
from softseqheap.build import insert_meld
from softseqheap.witnesses import interval_sort

values = [13, 5, 30, 20, 50, 14, 26, 33, 21, 4, 17, 44, 23, 9]
heap = insert_meld(values, 0.8, 2, False)
print(interval_sort(heap, 0.8, len(values), False, 75, False))
```

## Demo

A short walk through insert, extract, delete, meld, chunked building and
sorting by witnesses:

```
softseqheap-demo
softseqheap-demo --eps 0.5
```

`--eps` sets the error rate (default 0.8).

## What it does not do

Everything runs in a single thread. Chunked building, melding and the
"parallel" interval sorting all run one step after another; the names
describe how the work is split up, not concurrent execution. The package
also does not count comparisons.