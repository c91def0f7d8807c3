"""
Sparseq Errors: exception hierarchy shared by every module.

  - OutOfRange: a position/extent the sequence cannot reach
  - InvalidParameter: a sparsity, size or option that violates a precondition
  - ConsumedSequence: reading a handle a consuming operation already drained

Author: Carmen Esteban
"""


class SequenceError(Exception):
    """Base class for all sparseq errors."""


class OutOfRange(SequenceError, IndexError):
    """Requested position exceeds what the sequence can produce."""


class InvalidParameter(SequenceError, ValueError):
    """A parameter violates a precondition (e.g. non-positive sparsity)."""


class ConsumedSequence(SequenceError, RuntimeError):
    """The sequence handle was invalidated by a consuming operation."""
