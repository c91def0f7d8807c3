"""
Batch Estimate: deferred per-sparsity results and their ordered map.

An Estimate wraps the Future of one dispatched task and states explicitly
whether it is still pending, resolved to a value, or resolved to a
failure. An EstimateMap is the read-only, key-ordered view the batch
estimator hands back.

Author: Carmen Esteban
"""

from collections.abc import Mapping

import numpy as np

PENDING = "pending"
VALUE = "value"
FAILURE = "failure"


class Estimate:
    """
    Deferred density estimate for one sparsity.

    Parameters
    ----------
    sparsity : int
        Key of the task this handle belongs to.
    future : concurrent.futures.Future
        Future returned by the executor at dispatch time.
    """

    def __init__(self, sparsity, future):
        self.sparsity = sparsity
        self.future = future

    @property
    def state(self):
        if not self.future.done():
            return PENDING
        return FAILURE if self.future.exception() is not None else VALUE

    def done(self):
        return self.future.done()

    @property
    def ok(self):
        """True once resolved to a value."""
        return self.state == VALUE

    @property
    def failure(self):
        """The captured exception, or None (blocks until resolved)."""
        return self.future.exception()

    @property
    def value(self):
        """The density; re-raises the captured failure (blocks until resolved)."""
        return self.future.result()

    def result(self, timeout=None):
        return self.future.result(timeout=timeout)

    def __repr__(self):
        state = self.state
        if state == VALUE:
            detail = f"value={self.future.result():.6g}"
        elif state == FAILURE:
            detail = f"failure={self.future.exception()!r}"
        else:
            detail = "pending"
        return f"Estimate(sparsity={self.sparsity}, {detail})"


class EstimateMap(Mapping):
    """
    Read-only mapping sparsity -> Estimate, iterated in ascending key order.

    Examples
    --------
    >>> estimates = approximates_for(2, 5, 1000)
    >>> list(estimates)
    [2, 3, 4]
    >>> estimates[2].value
    0.5
    """

    def __init__(self, estimates):
        self._slots = dict(sorted(estimates.items()))

    def __getitem__(self, sparsity):
        return self._slots[sparsity]

    def __iter__(self):
        return iter(self._slots)

    def __len__(self):
        return len(self._slots)

    def successes(self):
        """Resolved values by sparsity, ascending."""
        return {k: e.value for k, e in self._slots.items() if e.state == VALUE}

    def failures(self):
        """Captured exceptions by sparsity, ascending."""
        return {k: e.failure for k, e in self._slots.items() if e.state == FAILURE}

    def pending(self):
        """Sparsities whose task has not completed yet."""
        return [k for k, e in self._slots.items() if e.state == PENDING]

    def to_array(self):
        """Densities in key order as float64, NaN where the task failed."""
        return np.array(
            [e.value if e.state == VALUE else np.nan for e in self._slots.values()],
            dtype=np.float64,
        )

    def __repr__(self):
        return (f"EstimateMap(size={len(self._slots)}, "
                f"ok={len(self.successes())}, "
                f"failed={len(self.failures())})")
