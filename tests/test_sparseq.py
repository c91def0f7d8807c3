"""Tests for sparseq v0.1.0."""
import numpy as np
import pytest

import sparseq
from sparseq import (
    LazySequence, count_from, take, value_at, sample_after,
    merge_iterators, merge_sorted, merge_sorted_prefixes,
    iterator_sparse, approximate_sparsity, sparse_prefix, density_profile,
    OutOfRange, InvalidParameter, ConsumedSequence, SequenceError,
)
from sparseq import fast


def test_version():
    assert sparseq.__version__ == "0.1.0"


def test_error_hierarchy():
    assert issubclass(OutOfRange, IndexError)
    assert issubclass(InvalidParameter, ValueError)
    assert issubclass(ConsumedSequence, SequenceError)


# === Lazy sequence ===

def test_lazy_sequence_single_pass():
    seq = LazySequence([10, 20, 30])
    assert seq.next_value() == 10
    assert list(seq) == [20, 30]
    assert seq.exhausted
    assert seq.position == 3
    with pytest.raises(StopIteration):
        seq.next_value()


def test_lazy_sequence_does_not_materialize():
    """Wrapping an infinite source must not consume it."""
    seq = count_from(1)
    assert seq.position == 0
    assert take(seq, 3) == [1, 2, 3]
    assert take(seq, 2) == [4, 5]


def test_take_shorter_source():
    assert take([1, 2], 5) == [1, 2]
    with pytest.raises(InvalidParameter):
        take([1, 2], -1)


# === Sampling ===

def test_sample_after_window():
    assert list(sample_after(count_from(1), 1, 2)) == [2, 3]


def test_sample_after_matches_slice():
    data = [3, 8, 13, 21, 34, 55, 89]
    for after in range(len(data) + 2):
        for size in range(len(data) + 2):
            assert list(sample_after(iter(data), after, size)) == data[after:after + size]


def test_sample_after_is_lazy():
    src = count_from(1)
    sample = sample_after(src, 5, 3)
    assert src.position == 0
    assert list(sample) == [6, 7, 8]


def test_sample_after_invalidates_source():
    src = LazySequence([1, 2, 3, 4])
    list(sample_after(src, 1, 2))
    assert not src.valid
    with pytest.raises(ConsumedSequence):
        src.next_value()


def test_sample_after_negative_args():
    with pytest.raises(InvalidParameter):
        sample_after(count_from(1), -1, 2)
    with pytest.raises(InvalidParameter):
        sample_after(count_from(1), 0, -2)


def test_sample_after_non_integer_args():
    with pytest.raises(InvalidParameter):
        sample_after(count_from(1), 2.0, 2)
    with pytest.raises(InvalidParameter):
        sample_after(count_from(1), 0, "3")
    assert list(sample_after(count_from(1), np.int64(1), np.int64(2))) == [2, 3]


def test_value_at():
    assert value_at(count_from(1), 0) == 1
    assert value_at(count_from(1), 99) == 100


def test_value_at_equals_single_sample():
    data = [5, 7, 11, 13]
    for i in range(len(data)):
        assert value_at(iter(data), i) == list(sample_after(iter(data), i, 1))[0]


def test_value_at_out_of_range():
    with pytest.raises(OutOfRange):
        value_at([1, 2, 3], 3)
    with pytest.raises(OutOfRange):
        value_at([], 0)
    with pytest.raises(OutOfRange):
        value_at(count_from(1), -1)


def test_value_at_non_integer_position():
    with pytest.raises(InvalidParameter):
        value_at(count_from(1), 2.0)
    with pytest.raises(InvalidParameter):
        value_at(count_from(1), True)
    assert value_at(count_from(1), np.int64(4)) == 5


def test_value_at_invalidates_handle():
    seq = count_from(1)
    value_at(seq, 2)
    with pytest.raises(ConsumedSequence):
        next(seq)


# === Merge ===

def test_merge_iterators_concatenates():
    merged = merge_iterators([[1, 3, 5], [2, 2, 4]])
    assert list(merged) == [1, 3, 5, 2, 2, 4]


def test_merge_iterators_sorted_when_ranges_disjoint():
    merged = list(merge_iterators([[1, 2, 2], [3, 3, 7], [9]]))
    assert merged == [1, 2, 2, 3, 3, 7, 9]


def test_merge_iterators_empty():
    assert list(merge_iterators([])) == []
    assert list(merge_iterators([[], []])) == []


def test_merge_iterators_infinite_first():
    merged = merge_iterators([iterator_sparse(2), [1]])
    assert take(merged, 3) == [2, 4, 6]


def test_merge_sorted_interleaves():
    merged = merge_sorted([[1, 3, 5], [2, 2, 4]])
    assert list(merged) == [1, 2, 2, 3, 4, 5]


def test_merge_sorted_keeps_duplicates():
    merged = list(merge_sorted([[1, 1, 2], [1, 2], [], [2]]))
    assert merged == [1, 1, 1, 2, 2, 2]


def test_merge_sorted_infinite():
    merged = merge_sorted([iterator_sparse(2), iterator_sparse(3)])
    assert take(merged, 7) == [2, 3, 4, 6, 6, 8, 9]


def test_merge_sorted_invalidates_inputs():
    a = LazySequence([1, 2])
    b = LazySequence([3])
    assert list(merge_sorted([a, b])) == [1, 2, 3]
    assert not a.valid and not b.valid


def test_merge_sorted_prefixes():
    merged = merge_sorted_prefixes([np.array([1, 3, 5]), [2, 2, 4], []])
    assert merged.dtype == np.int64
    assert merged.tolist() == [1, 2, 2, 3, 4, 5]
    assert merge_sorted_prefixes([]).size == 0


def test_merge_sorted_prefixes_rejects_unsorted():
    with pytest.raises(InvalidParameter):
        merge_sorted_prefixes([[3, 1]])


# === Sparse sequences ===

def test_iterator_sparse_elements():
    for k in (1, 2, 7):
        for i in (0, 1, 10, 500):
            assert value_at(iterator_sparse(k), i) == k * (i + 1)


def test_iterator_sparse_arbitrary_precision():
    k = 10 ** 30
    assert value_at(iterator_sparse(k), 2) == 3 * k


def test_iterator_sparse_invalid():
    for bad in (0, -3, 1.5, True):
        with pytest.raises(InvalidParameter):
            iterator_sparse(bad)


def test_approximate_sparsity_independent_of_extent():
    assert approximate_sparsity(2, 10) == approximate_sparsity(2, 10000) == 0.5
    for k in (1, 3, 7, 11):
        for extent in (1, 17, 1000):
            assert approximate_sparsity(k, extent) == pytest.approx(1 / k)


def test_approximate_sparsity_errors():
    with pytest.raises(OutOfRange):
        approximate_sparsity(3, 0)
    with pytest.raises(OutOfRange):
        approximate_sparsity(3, -5)
    with pytest.raises(InvalidParameter):
        approximate_sparsity(0, 10)


def test_sparse_prefix():
    prefix = sparse_prefix(3, 4)
    assert prefix.dtype == np.int64
    assert prefix.tolist() == [3, 6, 9, 12]
    assert sparse_prefix(5, 0).size == 0


def test_sparse_prefix_overflow():
    with pytest.raises(InvalidParameter):
        sparse_prefix(2 ** 62, 4)


def test_sparse_prefix_overflow_numpy_extent():
    """A numpy extent must not wrap around in the overflow check."""
    with pytest.raises(InvalidParameter):
        sparse_prefix(2 ** 62, np.int64(4))
    with pytest.raises(InvalidParameter):
        sparse_prefix(3, 4.0)
    assert sparse_prefix(3, np.int64(4)).tolist() == [3, 6, 9, 12]


def test_density_profile():
    profile = density_profile(4, [1, 10, 1000])
    assert np.allclose(profile, 0.25)


# === Numba kernels ===

def test_fast_multiples():
    out = fast.multiples(np.int64(2), np.int64(3))
    assert out.tolist() == [2, 4, 6]


def test_fast_merge_sorted():
    a = np.array([1, 4, 4], dtype=np.int64)
    b = np.array([0, 4, 9], dtype=np.int64)
    assert fast.merge_sorted(a, b).tolist() == [0, 1, 4, 4, 4, 9]


def test_fast_merge_sorted_ties_and_empty():
    a = np.array([1, 2, 2, 5], dtype=np.int64)
    b = np.array([2, 2, 3], dtype=np.int64)
    empty = np.empty(0, dtype=np.int64)
    assert fast.merge_sorted(a, b).tolist() == [1, 2, 2, 2, 2, 3, 5]
    assert fast.merge_sorted(b, a).tolist() == [1, 2, 2, 2, 2, 3, 5]
    assert fast.merge_sorted(empty, b).tolist() == [2, 2, 3]
    assert fast.merge_sorted(a, empty).tolist() == [1, 2, 2, 5]
    assert fast.merge_sorted(np.array([7], dtype=np.int64), a).tolist() == [1, 2, 2, 5, 7]


# === Detector ===

def test_detect_dense_prefix():
    report = sparseq.detect_sequence(4, 1000)
    assert report["span"] == 4000
    assert report["nnz"] == 1000
    assert report["density"] == 0.25
    assert report["is_exact"]
    assert report["strategy"] == "materialize"


def test_detect_very_sparse_prefix():
    report = sparseq.detect_sequence(1000, 100)
    assert report["density"] < 0.01
    assert report["strategy"] == "lazy"
    assert report["compression"] > 1


def test_detect_indicator_members():
    from sparseq.detector import indicator
    row = indicator(3, 5)
    assert row.shape == (1, 15)
    assert row.nonzero()[1].tolist() == [2, 5, 8, 11, 14]


def test_detect_numpy_extent():
    from sparseq.detector import indicator
    row = indicator(3, np.int64(5))
    assert row.shape == (1, 15)
    assert row.nnz == 5
    with pytest.raises(InvalidParameter):
        indicator(2 ** 62, np.int64(4))
    report = sparseq.detect_sequence(4, np.int64(1000))
    assert report["span"] == 4000
    assert report["is_exact"]


def test_detect_rejects_huge_extent():
    from sparseq.detector import MATERIALIZE_LIMIT
    with pytest.raises(InvalidParameter):
        sparseq.detect_sequence(2, MATERIALIZE_LIMIT + 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
