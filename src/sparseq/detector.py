"""
Sparseq Detector: membership report for a materialized sparse prefix.

Builds the indicator row of the sparse sequence over the naturals
1..sparsity*extent as a scipy.sparse CSR matrix and reports:
  - Span, nnz, measured vs expected density
  - Memory of the indicator, dense vs sparse
  - Recommended way to consume the sequence (lazy/materialize)

Usage:
    import sparseq
    report = sparseq.detect_sequence(4, 1000)
    print(report)

Author: Carmen Esteban
"""

import numpy as np
from scipy import sparse

from sparseq.errors import InvalidParameter
from sparseq.sequence import as_index
from sparseq.sparse import sparse_prefix

MATERIALIZE_LIMIT = 10_000_000


def indicator(sparsity, extent):
    """CSR row of shape (1, sparsity*extent), 1.0 at every member."""
    extent = as_index(extent, "extent")
    members = sparse_prefix(sparsity, extent)
    span = int(sparsity) * extent
    cols = members - 1
    rows = np.zeros(len(cols), dtype=np.int64)
    vals = np.ones(len(cols), dtype=np.float64)
    return sparse.csr_matrix((vals, (rows, cols)), shape=(1, span))


def detect_sequence(sparsity, extent):
    """
    Analyze the sparse prefix and recommend how to consume it.

    Parameters
    ----------
    sparsity : int
        Positive sparsity factor.
    extent : int
        Number of sequence elements materialized.

    Returns
    -------
    dict
        Report with sparsity, extent, span, nnz, density, expected_density,
        is_exact, memory estimates, strategy and reason.
    """
    extent = as_index(extent, "extent")
    if extent > MATERIALIZE_LIMIT:
        raise InvalidParameter(
            f"Extent {extent:,} exceeds MATERIALIZE_LIMIT ({MATERIALIZE_LIMIT:,}); "
            f"use approximate_sparsity for lazy estimation"
        )

    row = indicator(sparsity, extent)
    span = row.shape[1]
    nnz = row.nnz
    density = nnz / span if span > 0 else 0
    expected = 1 / int(sparsity)

    ram_sparse = row.data.nbytes + row.indices.nbytes + row.indptr.nbytes
    ram_dense = span * 8

    # Strategy recommendation
    if density < 0.01:
        strategy = "lazy"
        reason = f"Very sparse ({density:.4%}), iterate lazily"
    else:
        strategy = "materialize"
        reason = f"Dense enough ({density:.2%}), materialize with sparse_prefix"

    return {
        "sparsity": int(sparsity),
        "extent": extent,
        "span": span,
        "nnz": nnz,
        "density": density,
        "expected_density": expected,
        "is_exact": span > 0 and density == expected,
        "strategy": strategy,
        "reason": reason,
        "ram_dense_mb": round(ram_dense / 1e6, 1),
        "ram_sparse_mb": round(ram_sparse / 1e6, 1),
        "compression": round(ram_dense / max(ram_sparse, 1), 1),
    }
