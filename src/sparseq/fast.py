"""
Sparseq Fast: Numba JIT-compiled kernels for materialized prefixes.

The lazy API works on Python ints of any size. Once a caller decides to
materialize a finite prefix that fits in int64, these kernels build and
merge it in compiled loops instead of element-by-element Python.

Install: pip install numba

Author: Carmen Esteban
"""

import numpy as np
from numba import njit

INT64_MAX = np.iinfo(np.int64).max


# ============================================================
# Sparse prefix: first `count` multiples of `sparsity`
# ============================================================

@njit(cache=True)
def multiples(sparsity, count):
    """Return ``sparsity * (i + 1)`` for ``i`` in ``0..count-1``.

    Parameters
    ----------
    sparsity : int64
        Positive step.
    count : int64
        Number of elements.

    Returns
    -------
    numpy array of int64
    """
    out = np.empty(count, dtype=np.int64)
    value = np.int64(0)
    for i in range(count):
        value += sparsity
        out[i] = value
    return out


# ============================================================
# Two-way merge of sorted prefixes (duplicates kept)
# ============================================================

@njit(cache=True)
def merge_sorted(a, b):
    """Merge two sorted int64 prefixes, keeping every duplicate.

    Each ``b[j]`` lands after every ``a`` element ``<= b[j]`` and after
    ``b[0..j-1]``, so on ties the elements of ``a`` come first. Folding
    prefixes left to right therefore orders equal values by source index,
    matching ``merge.merge_sorted``.

    Parameters
    ----------
    a, b : numpy arrays of int64
        Sorted ascending.

    Returns
    -------
    numpy array of int64
        Merged sorted array of length ``len(a) + len(b)``.
    """
    na = len(a)
    nb = len(b)
    out = np.empty(na + nb, dtype=np.int64)
    taken = np.zeros(na + nb, dtype=np.bool_)

    slots = np.searchsorted(a, b, side='right')
    for j in range(nb):
        k = slots[j] + j
        out[k] = b[j]
        taken[k] = True

    i = 0
    for k in range(na + nb):
        if not taken[k]:
            out[k] = a[i]
            i += 1
    return out
