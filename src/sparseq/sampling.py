"""
Sparseq Sampling: extract one element or a contiguous window by position.

Both operations take ownership of the sequence they are given: once the
result has been produced the input handle is invalidated.

Usage:
    from sparseq import value_at, sample_after, count_from

    value_at(count_from(1), 4)                    # 5
    list(sample_after(count_from(1), 1, 2))       # [2, 3]

Author: Carmen Esteban
"""

from itertools import islice

from sparseq.errors import InvalidParameter, OutOfRange
from sparseq.sequence import LazySequence, as_index, as_sequence


def value_at(sequence, position):
    """
    Return the element at zero-based ``position``.

    Elements ``0..position-1`` are consumed and discarded.

    Parameters
    ----------
    sequence : iterable or LazySequence
        Source sequence; invalid after the call.
    position : int
        Zero-based logical index.

    Returns
    -------
    int
        The element at ``position``.

    Raises
    ------
    OutOfRange
        If ``position`` is negative or the sequence ends before it.
    InvalidParameter
        If ``position`` is not an integer.
    """
    position = as_index(position, "position")
    seq = as_sequence(sequence)
    if position < 0:
        seq.invalidate()
        raise OutOfRange(f"Position {position} is negative")
    try:
        for value in islice(seq, position, position + 1):
            return value
    finally:
        seq.invalidate()
    raise OutOfRange(
        f"Sequence ended after {seq.position:,} elements, "
        f"position {position:,} unreachable"
    )


def _window(seq, after, sample_size):
    try:
        yield from islice(seq, after, after + sample_size)
    finally:
        seq.invalidate()


def sample_after(sequence, after, sample_size):
    """
    Lazily sample elements at indices ``after .. after+sample_size-1``.

    Fewer elements are produced if the source ends early. Nothing is read
    from the source until the returned sequence is iterated.

    Parameters
    ----------
    sequence : iterable or LazySequence
        Source sequence; invalid once the sample is drained.
    after : int
        Index of the first element included, zero-based.
    sample_size : int
        Maximum number of elements produced.

    Returns
    -------
    LazySequence
        Finite sequence of at most ``sample_size`` elements.
    """
    after = as_index(after, "after")
    sample_size = as_index(sample_size, "sample_size")
    if after < 0:
        raise InvalidParameter(f"after must be non-negative, got {after}")
    if sample_size < 0:
        raise InvalidParameter(f"sample_size must be non-negative, got {sample_size}")
    return LazySequence(_window(as_sequence(sequence), after, sample_size))
