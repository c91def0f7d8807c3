"""
Sparseq Batch: concurrent density estimation over a range of sparsities.

Each sparsity is estimated as an independent task on a worker pool scoped
to the call. Failures are captured per key; the call returns only once
every task has resolved.

Example:
    from sparseq.batch import approximates_for

    estimates = approximates_for(0, 5, 1000)
    estimates[0].failure      # InvalidParameter('Sparsity must be positive, got 0')
    estimates[4].value        # 0.25
    estimates.to_array()      # array([nan, 1. , 0.5, 0.333..., 0.25])

Author: Carmen Esteban
"""

from sparseq.batch.estimate import Estimate, EstimateMap
from sparseq.batch.estimator import (
    approximates_for, approximates_over, EXECUTORS, DEFAULT_EXECUTOR,
)

__all__ = [
    "Estimate", "EstimateMap", "approximates_for", "approximates_over",
    "EXECUTORS", "DEFAULT_EXECUTOR",
]
