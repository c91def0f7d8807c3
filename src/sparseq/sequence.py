"""
Sparseq Sequence: single-pass lazy cursor over arbitrary-precision integers.

A LazySequence never materializes its source. Elements are produced on
demand, in source order, and cannot be re-read through the same handle.
Consuming operations (value_at, sample_after, merge_*) invalidate the
handle they drain; callers needing a second pass must build a new one.

Usage:
    from sparseq.sequence import LazySequence, count_from, take

    seq = count_from(1)          # 1, 2, 3, ...
    take(seq, 3)                 # [1, 2, 3]
    seq.position                 # 3

Author: Carmen Esteban
"""

from itertools import count, islice
import operator

from sparseq.errors import ConsumedSequence, InvalidParameter


class LazySequence:
    """
    Produce-on-demand cursor over an iterable.

    Parameters
    ----------
    source : iterable
        Any finite or infinite iterable of ints. Only an iterator over it
        is kept; nothing is buffered.

    Examples
    --------
    >>> seq = LazySequence([10, 20, 30])
    >>> seq.next_value()
    10
    >>> list(seq)
    [20, 30]
    >>> seq.exhausted
    True
    """

    def __init__(self, source):
        self._it = iter(source)
        self.position = 0
        self.exhausted = False
        self._invalid = False

    def next_value(self):
        """Produce the next element or raise StopIteration on exhaustion."""
        if self._invalid:
            raise ConsumedSequence(
                f"Sequence already consumed (stopped at position {self.position})"
            )
        if self.exhausted:
            raise StopIteration
        try:
            value = next(self._it)
        except StopIteration:
            self.exhausted = True
            raise
        self.position += 1
        return value

    def invalidate(self):
        """Mark the handle as drained by a consuming operation."""
        self._invalid = True

    @property
    def valid(self):
        return not self._invalid

    def __iter__(self):
        return self

    def __next__(self):
        return self.next_value()

    def __repr__(self):
        state = "consumed" if self._invalid else (
            "exhausted" if self.exhausted else "open")
        return f"LazySequence(position={self.position:,}, state={state})"


def as_sequence(obj):
    """Wrap an iterable as a LazySequence (returned unchanged if it is one)."""
    if isinstance(obj, LazySequence):
        return obj
    return LazySequence(obj)


def count_from(start=1, step=1):
    """Infinite arithmetic sequence start, start+step, start+2*step, ..."""
    return LazySequence(count(start, step))


def as_index(value, name):
    """Return ``value`` as a Python int, or raise InvalidParameter.

    Accepts ints and numpy integers; rejects floats, bools and the rest.
    """
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}") from None


def take(sequence, n):
    """Materialize at most the first n elements of a sequence as a list."""
    n = as_index(n, "n")
    if n < 0:
        raise InvalidParameter(f"Cannot take a negative number of elements: {n}")
    return list(islice(as_sequence(sequence), n))
