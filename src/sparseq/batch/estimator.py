"""
Batch Estimator: concurrent, failure-isolated density estimation.

One task per sparsity is submitted to a worker pool built for the call.
Each task only reads its own (sparsity, extent) and resolves its own
slot, created at dispatch time, so the result map needs no locking. The
call blocks until every task has completed, successfully or not; a task
that raises is recorded on its own slot and never touches its siblings.
There are no retries, cancellation or timeouts.

Usage:
    from sparseq.batch import approximates_for

    estimates = approximates_for(2, 5, 1000)
    for sparsity, estimate in estimates.items():
        print(sparsity, estimate.value)

Author: Carmen Esteban
"""

from concurrent.futures import (
    ALL_COMPLETED, ProcessPoolExecutor, ThreadPoolExecutor, wait,
)
import os
import sys
import time

from sparseq.batch.estimate import EstimateMap, Estimate
from sparseq.errors import InvalidParameter
from sparseq.sparse import approximate_sparsity

EXECUTORS = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}
DEFAULT_EXECUTOR = "thread"


def approximates_over(sparsities, extent, max_workers=None,
                      executor=DEFAULT_EXECUTOR, verbose=False):
    """
    Estimate density concurrently for each sparsity in ``sparsities``.

    Parameters
    ----------
    sparsities : iterable of int
        Keys to estimate; duplicates are dispatched once.
    extent : int
        Number of elements analyzed per task. Shared read-only.
    max_workers : int, optional
        Pool size. Default: one thread per task for ``"thread"``,
        ``min(n_tasks, os.cpu_count())`` for ``"process"``.
    executor : str
        ``"thread"`` (ThreadPoolExecutor) or ``"process"``
        (ProcessPoolExecutor).
    verbose : bool
        Print dispatch and completion summary.

    Returns
    -------
    EstimateMap
        Fully resolved estimates, ascending by sparsity.
    """
    if executor not in EXECUTORS:
        raise InvalidParameter(
            f"Unknown executor {executor!r}, expected one of {sorted(EXECUTORS)}"
        )
    if max_workers is not None and max_workers < 1:
        raise InvalidParameter(f"max_workers must be >= 1, got {max_workers}")

    keys = sorted(set(sparsities))
    if not keys:
        return EstimateMap({})

    if max_workers is None:
        # one thread per task; processes are bounded by the CPU count
        if executor == "process":
            max_workers = min(len(keys), os.cpu_count() or 1)
        else:
            max_workers = len(keys)

    if verbose:
        print(f"  [batch] {len(keys):,} tasks, extent={extent:,}, "
              f"{executor} pool x{max_workers}")
        sys.stdout.flush()

    t0 = time.time()
    slots = {}
    with EXECUTORS[executor](max_workers=max_workers) as pool:
        for k in keys:
            slots[k] = Estimate(k, pool.submit(approximate_sparsity, k, extent))
        wait([e.future for e in slots.values()], return_when=ALL_COMPLETED)

    estimates = EstimateMap(slots)

    if verbose:
        print(f"  [batch] done: {len(estimates.successes()):,} ok, "
              f"{len(estimates.failures()):,} failed [{time.time() - t0:.2f}s]")
        sys.stdout.flush()

    return estimates


def approximates_for(sparsity_min, sparsity_max, extent, max_workers=None,
                     executor=DEFAULT_EXECUTOR, verbose=False):
    """
    Estimate density for every sparsity in ``[sparsity_min, sparsity_max)``.

    An empty range (``sparsity_min >= sparsity_max``) gives an empty map.
    Invalid sparsities (e.g. 0) resolve to an ``InvalidParameter`` failure
    on their own key; the other keys are unaffected.

    Returns
    -------
    EstimateMap
        Keys in ascending order, every entry resolved.
    """
    return approximates_over(
        range(sparsity_min, sparsity_max), extent,
        max_workers=max_workers, executor=executor, verbose=verbose,
    )
