import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from softseqheap.chazelle import chazelle_sort, find_minima
from softseqheap.heap import EmptyHeapError, SoftSequenceHeap


def _heap(values, eps):
    heap = SoftSequenceHeap(eps)
    heap.insert_all(values)
    return heap


def test_find_minima_without_corruption():
    values = list(range(1, 11))
    random.Random(3).shuffle(values)
    heap = _heap(values, 0.01)
    minima, extracted = find_minima(heap, 0.25, len(values))
    ordered = sorted(values)
    assert extracted == ordered
    assert minima == [ordered[0], ordered[5]]
    assert not heap


def test_find_minima_chunk_count_and_permutation():
    values = random.Random(7).sample(range(1000), 120)
    heap = _heap(values, 0.5)
    minima, extracted = find_minima(heap, 0.1, len(values))
    assert len(minima) == 5
    assert sorted(extracted) == sorted(values)
    assert not heap


def test_chazelle_sort_without_corruption_is_sorted():
    values = random.Random(11).sample(range(500), 60)
    heap = _heap(values, 0.01)
    assert chazelle_sort(heap, 0.2, len(values)) == sorted(values)


def test_chazelle_sort_with_corruption_keeps_every_item():
    values = random.Random(5).sample(range(10000), 300)
    heap = _heap(values, 0.5)
    result = chazelle_sort(heap, 0.1, len(values))
    assert sorted(result) == sorted(values)
    assert not heap


def test_single_item():
    heap = _heap([42], 0.5)
    assert chazelle_sort(heap, 0.5, 1) == [42]


def test_zero_items_rejected():
    with pytest.raises(ValueError):
        chazelle_sort(SoftSequenceHeap(0.5), 0.5, 0)


def test_zero_error_rate_rejected():
    with pytest.raises(ValueError):
        find_minima(_heap([1, 2], 0.5), 0.0, 2)


def test_empty_heap_raises():
    with pytest.raises(EmptyHeapError):
        chazelle_sort(SoftSequenceHeap(0.5), 0.5, 1)


@settings(max_examples=50, deadline=None)
@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=80))
def test_result_is_permutation(values):
    heap = _heap(values, 0.5)
    result = chazelle_sort(heap, 0.2, len(values))
    assert sorted(result) == sorted(values)