"""
Sparseq - Lazy Sparse Sequences
===============================

Lazy, single-pass sequences of arbitrary-precision integers, sampling by
position, duplicate-preserving merge, sparse sequence generation and
concurrent density estimation.

Quick start:
    import sparseq

    # Sample a window from an infinite sequence
    list(sparseq.sample_after(sparseq.count_from(1), 1, 2))   # [2, 3]

    # Sparse sequence of sparsity 3 and its density
    sparseq.value_at(sparseq.iterator_sparse(3), 9)            # 30
    sparseq.approximate_sparsity(3, 1000)                      # 0.333...

    # Concurrent estimation over a range, failures captured per key
    from sparseq.batch import approximates_for
    estimates = approximates_for(2, 5, 1000)

Author: Carmen Esteban
License: MIT
"""

__version__ = "0.1.0"
__author__ = "Carmen Esteban"

from sparseq.errors import (
    SequenceError, OutOfRange, InvalidParameter, ConsumedSequence,
)
from sparseq.sequence import LazySequence, as_sequence, count_from, take
from sparseq.sampling import value_at, sample_after
from sparseq.merge import merge_iterators, merge_sorted, merge_sorted_prefixes
from sparseq.sparse import (
    iterator_sparse, approximate_sparsity, sparse_prefix, density_profile,
)
from sparseq.detector import detect_sequence
from sparseq import batch

__all__ = [
    "SequenceError", "OutOfRange", "InvalidParameter", "ConsumedSequence",
    "LazySequence", "as_sequence", "count_from", "take",
    "value_at", "sample_after",
    "merge_iterators", "merge_sorted", "merge_sorted_prefixes",
    "iterator_sparse", "approximate_sparsity", "sparse_prefix",
    "density_profile", "detect_sequence", "batch",
]
