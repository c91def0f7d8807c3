"""
Density sweep — concurrent sparsity estimation
===============================================

Estimates the density of every sparse sequence with sparsity in
[SPARSITY_MIN, SPARSITY_MAX) and prints the table, including the keys
that failed (sparsity 0 is deliberately in range).

Usage:
  pip install sparseq
  python run_density_sweep.py [extent] [thread|process]

Author: Carmen Esteban
"""

import sys
import time

import numpy as np

import sparseq
from sparseq.batch import approximates_for

# ── Config ──
SPARSITY_MIN = 0
SPARSITY_MAX = 12


def main(extent, executor):
    print(f"sparseq {sparseq.__version__}")
    print(f"Sparsity range: [{SPARSITY_MIN}, {SPARSITY_MAX}), extent={extent:,}")

    t0 = time.time()
    estimates = approximates_for(SPARSITY_MIN, SPARSITY_MAX, extent,
                                 executor=executor, verbose=True)
    elapsed = time.time() - t0

    print(f"\n{'sparsity':>8}  {'density':>10}  {'1/k':>10}")
    for k, est in estimates.items():
        if est.ok:
            print(f"{k:>8}  {est.value:>10.6f}  {1 / k:>10.6f}")
        else:
            print(f"{k:>8}  {'FAILED':>10}  {type(est.failure).__name__}: {est.failure}")

    densities = estimates.to_array()
    print(f"\n  OK: {int(np.isfinite(densities).sum())}/{len(estimates)}  [{elapsed:.2f}s]")

    report = sparseq.detect_sequence(SPARSITY_MAX - 1, min(extent, 1_000_000))
    print(f"  Indicator k={report['sparsity']}: nnz={report['nnz']:,}, "
          f"density={report['density']:.4%}, strategy={report['strategy']}")


if __name__ == "__main__":
    main(
        int(sys.argv[1]) if len(sys.argv) > 1 else 100_000,
        sys.argv[2] if len(sys.argv) > 2 else "process",
    )
