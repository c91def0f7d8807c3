"""
Sparseq Merge: combine several sequences into one, keeping every duplicate.

Two strategies:
  - merge_iterators: concatenation in input order (sequence 0 fully, then 1, ...)
  - merge_sorted: ascending k-way merge over a min-heap of per-source cursors

Concatenation is only globally ascending when every input is ascending AND
successive inputs do not overlap in value range. merge_sorted is ascending
whenever every input is ascending.

Usage:
    from sparseq import merge_iterators, merge_sorted

    list(merge_iterators([[1, 3, 5], [2, 2, 4]]))   # [1, 3, 5, 2, 2, 4]
    list(merge_sorted([[1, 3, 5], [2, 2, 4]]))      # [1, 2, 2, 3, 4, 5]

Author: Carmen Esteban
"""

import heapq

import numpy as np

from sparseq import fast as _fast
from sparseq.errors import InvalidParameter
from sparseq.sequence import LazySequence, as_sequence


def _concat(seqs):
    for seq in seqs:
        try:
            yield from seq
        finally:
            seq.invalidate()


def merge_iterators(sequences):
    """
    Concatenate sequences in the order given, without filtering.

    Parameters
    ----------
    sequences : iterable of iterables
        Ordered collection of input sequences. An infinite input means
        the inputs after it are never reached.

    Returns
    -------
    LazySequence
        Every element of every input, exactly once.
    """
    return LazySequence(_concat([as_sequence(s) for s in sequences]))


def _heap_merge(seqs):
    try:
        # (value, source index): ties break on source index, so the merge
        # is stable and sequences themselves are never compared
        heap = []
        for idx, seq in enumerate(seqs):
            try:
                heap.append((seq.next_value(), idx))
            except StopIteration:
                pass
        heapq.heapify(heap)

        while heap:
            value, idx = heap[0]
            yield value
            try:
                nxt = seqs[idx].next_value()
            except StopIteration:
                heapq.heappop(heap)
            else:
                heapq.heapreplace(heap, (nxt, idx))
    finally:
        for seq in seqs:
            seq.invalidate()


def merge_sorted(sequences):
    """
    Ascending k-way merge of individually sorted sequences.

    Holds one pending element per source, so infinite inputs are fine as
    long as the caller only materializes a finite prefix.

    Parameters
    ----------
    sequences : iterable of iterables
        Inputs, each sorted ascending.

    Returns
    -------
    LazySequence
        All elements, ascending, duplicates preserved.
    """
    return LazySequence(_heap_merge([as_sequence(s) for s in sequences]))


def merge_sorted_prefixes(arrays):
    """
    Merge materialized, sorted int64 prefixes with the compiled kernel.

    Parameters
    ----------
    arrays : list of array-like of int
        Each sorted ascending and within int64 range.

    Returns
    -------
    numpy array of int64
    """
    merged = np.empty(0, dtype=np.int64)
    for i, arr in enumerate(arrays):
        arr = np.ascontiguousarray(arr, dtype=np.int64)
        if arr.ndim != 1:
            raise InvalidParameter(f"Prefix {i} must be 1-D, got shape {arr.shape}")
        if arr.size > 1 and np.any(np.diff(arr) < 0):
            raise InvalidParameter(f"Prefix {i} is not sorted ascending")
        merged = _fast.merge_sorted(merged, arr)
    return merged
