"""Errors and pre/postcondition checks shared by all subset-sum solvers."""
import numbers

import numpy as np


class InvalidArgument(ValueError):
    """Caller supplied a bound or input set outside the solver contract."""


class CapacityExceeded(RuntimeError):
    """FFT vector length would exceed config.MAX_FFT_LIMIT."""


class InternalInvariantViolation(RuntimeError):
    """A postcondition failed. Indicates a bug, never a user error."""


def _is_integer(v):
    return isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_))


def validate_input(S, u):
    """Check that u is a positive integer and every element of S is in [1, u-1].

    bool is rejected even though it is an Integral.
    """
    if not _is_integer(u):
        raise InvalidArgument(f"u must be an integer, was: {u!r}")
    if u <= 0:
        raise InvalidArgument(f"u must be natural, was: {u}")
    for e in S:
        if not _is_integer(e):
            raise InvalidArgument(f"all elements in S must be integers, got: {e!r}")
        if e <= 0 or e >= u:
            raise InvalidArgument(
                f"all elements in S must be in range: [1..{u - 1}], got: {e}")


def validate_output(sums, u):
    for e in sums:
        if e <= 0 or e >= u:
            raise InternalInvariantViolation(
                f"all elements in output must be in range: [1..{u - 1}], got: {e}")


def sorted_elements(S):
    """Sorted int64 view of an already validated input set."""
    return np.array(sorted(int(e) for e in S), dtype=np.int64)
