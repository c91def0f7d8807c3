"""
Sparseq Sparse: regularly spaced subsets of the naturals and their density.

The sparse sequence of sparsity k is k, 2k, 3k, ... (element i is k*(i+1)).
Its density over the first `extent` elements is extent / (k * extent),
which is exactly 1/k for every extent >= 1: sampling further out does not
change the estimate, which makes it a self-checking workload.

Usage:
    from sparseq import iterator_sparse, approximate_sparsity

    take(iterator_sparse(3), 4)          # [3, 6, 9, 12]
    approximate_sparsity(4, 1000)        # 0.25

Author: Carmen Esteban
"""

from itertools import count

import numpy as np

from sparseq import fast as _fast
from sparseq.errors import InvalidParameter
from sparseq.sampling import value_at
from sparseq.sequence import LazySequence, as_index


def _check_sparsity(sparsity):
    if isinstance(sparsity, bool) or not isinstance(sparsity, (int, np.integer)):
        raise InvalidParameter(f"Sparsity must be an integer, got {sparsity!r}")
    if sparsity <= 0:
        raise InvalidParameter(f"Sparsity must be positive, got {sparsity}")
    return int(sparsity)


def iterator_sparse(sparsity):
    """
    Infinite ascending sequence of the positive multiples of ``sparsity``.

    Raises
    ------
    InvalidParameter
        If ``sparsity`` is not a positive integer.
    """
    k = _check_sparsity(sparsity)
    return LazySequence(count(k, k))


def approximate_sparsity(sparsity, extent):
    """
    Density of the sparse sequence over its first ``extent`` elements.

    Parameters
    ----------
    sparsity : int
        Positive sparsity factor.
    extent : int
        Number of elements analyzed; the element at ``extent - 1`` is read.

    Returns
    -------
    float
        ``extent / value_at(iterator_sparse(sparsity), extent - 1)``,
        i.e. ``1 / sparsity`` up to rounding.

    Raises
    ------
    InvalidParameter
        If ``sparsity`` is not a positive integer.
    OutOfRange
        If ``extent <= 0``.
    """
    extent = as_index(extent, "extent")
    return extent / value_at(iterator_sparse(sparsity), extent - 1)


def sparse_prefix(sparsity, extent):
    """First ``extent`` elements of the sparse sequence as an int64 array."""
    k = _check_sparsity(sparsity)
    extent = as_index(extent, "extent")
    if extent < 0:
        raise InvalidParameter(f"Extent must be non-negative, got {extent}")
    if k * extent > _fast.INT64_MAX:
        raise InvalidParameter(
            f"Prefix of sparsity={k:,}, extent={extent:,} overflows int64; "
            f"use iterator_sparse instead"
        )
    return _fast.multiples(np.int64(k), np.int64(extent))


def density_profile(sparsity, extents):
    """Density estimate for each extent, as a float64 array."""
    return np.array(
        [approximate_sparsity(sparsity, e) for e in extents], dtype=np.float64
    )
