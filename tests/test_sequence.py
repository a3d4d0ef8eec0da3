from collections import deque

import pytest
from hypothesis import given, strategies as st

from softseqheap.circular import CircularList
from softseqheap.sequence import Head, Node, binary_merge, merge_heads, prune


def make_head(keys, rank=0):
    return Head(sequence=deque(Node(k) for k in keys), rank=rank)


def keys_of(sequence):
    return [node.key for node in sequence]


def test_node_starts_with_empty_sets():
    node = Node(4)
    assert node.key == 4
    assert len(node.corruption_set) == 0
    assert len(node.witness_set) == 0


def test_head_str_single_node():
    head = make_head([7])
    assert str(head) == "rank 0: [\n7 (C={}, W={})\n]\n"


def test_head_str_separates_nodes():
    head = make_head([1, 2], rank=1)
    head.sequence[0].witness_set.append(9)
    text = str(head)
    assert text.startswith("rank 1: [\n")
    assert "1 (C={}, W={9}), \n" in text
    assert text.endswith("2 (C={}, W={})\n]\n")


@given(
    st.lists(st.integers(), max_size=20).map(sorted),
    st.lists(st.integers(), max_size=20).map(sorted),
)
def test_binary_merge_sorted(a, b):
    merged = binary_merge(make_head(a), make_head(b))
    assert keys_of(merged) == sorted(a + b)


def test_binary_merge_ties_prefer_first():
    first = make_head([1, 2])
    second = make_head([1, 2])
    merged = list(binary_merge(first, second))
    assert merged[0] is first.sequence[0]
    assert merged[1] is second.sequence[0]
    assert merged[2] is first.sequence[1]


def test_merge_heads_raises_rank():
    merged = merge_heads(make_head([1], rank=2), make_head([0], rank=2))
    assert merged.rank == 3
    assert keys_of(merged.sequence) == [0, 1]


def test_merge_heads_rank_mismatch():
    with pytest.raises(ValueError):
        merge_heads(make_head([1], rank=0), make_head([2], rank=1))


def test_prune_odd_length():
    seq = make_head([1, 2, 3, 4, 5]).sequence
    result = prune(seq)
    assert keys_of(result) == [1, 3, 5]
    assert list(result[0].witness_set) == [2]
    assert list(result[1].corruption_set) == [2]
    assert list(result[1].witness_set) == [4]
    assert list(result[2].corruption_set) == [4]


def test_prune_even_length_keeps_last():
    result = prune(make_head([1, 2, 3, 4]).sequence)
    assert keys_of(result) == [1, 3, 4]
    assert list(result[2].corruption_set) == []


def test_prune_short_sequences_unchanged():
    assert keys_of(prune(make_head([1, 2]).sequence)) == [1, 2]
    assert keys_of(prune(make_head([1]).sequence)) == [1]
    assert keys_of(prune(deque())) == []


def test_prune_moves_sets_of_pruned_node():
    seq = make_head([1, 2, 3]).sequence
    seq[1].witness_set = CircularList([20])
    seq[1].corruption_set = CircularList([10])
    result = prune(seq)
    assert list(result[0].witness_set) == [2, 20]
    assert list(result[0].corruption_set) == [10]
    assert list(result[1].corruption_set) == [2]


@given(st.lists(st.integers(), min_size=1, max_size=30).map(sorted))
def test_prune_keeps_ends_and_all_keys(keys):
    result = prune(make_head(keys).sequence)
    kept = keys_of(result)
    assert kept[0] == keys[0]
    assert kept[-1] == keys[-1]
    assert kept == sorted(kept)
    seen = list(kept)
    for node in result:
        seen.extend(node.witness_set)
    assert sorted(seen) == keys
    corrupted = [k for node in result for k in node.corruption_set]
    assert len(corrupted) == len(keys) - len(kept)