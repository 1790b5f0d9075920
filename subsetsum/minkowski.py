"""Minkowski sum of bounded integer sets via FFT convolution.

A ⊕ B = {a + b | a in A, b in B} is read off the convolution of the
characteristic vectors of A and B: coefficient i counts the pairs summing to
i, so it is an integer >= 1 exactly when i is in A ⊕ B. Floating-point FFT
leaves noise around the true integers, hence the FFT_EPS threshold.
"""
import numpy as np

from . import config
from .validation import InvalidArgument, CapacityExceeded


def minkowski_sum(A, B):
    """Compute A ⊕ B for two sets of non-negative integers.

    Parameters
    ----------
    A, B : array-like of int
        Non-negative integers. Duplicates are allowed and ignored.

    Returns
    -------
    Sorted, duplicate-free int64 array.
    """
    A = np.unique(np.asarray(A, dtype=np.int64))
    B = np.unique(np.asarray(B, dtype=np.int64))
    if len(A) == 0 or len(B) == 0:
        return np.empty(0, dtype=np.int64)
    if A[0] < 0 or B[0] < 0:
        raise InvalidArgument(
            f"Minkowski sum operands must be non-negative, got min {min(A[0], B[0])}")

    limit = 2 + 2 * int(max(A[-1], B[-1]))
    if limit > config.MAX_FFT_LIMIT:
        raise CapacityExceeded(
            f"FFT limit {limit:,} exceeds MAX_FFT_LIMIT={config.MAX_FFT_LIMIT:,}")

    c_a = characteristic(A, limit)
    c_b = characteristic(B, limit)
    c_c = convolution(c_a, c_b)
    return inverse_characteristic(c_c, limit)


def characteristic(values, limit):
    """Indicator vector of length 2*limit, zero-padded past `limit`."""
    c = np.zeros(2 * limit, dtype=np.float64)
    c[values] = 1.0
    return c


def convolution(c_a, c_b):
    """Linear convolution of two equal-length, zero-padded real vectors."""
    n = len(c_a)
    fa = np.fft.rfft(c_a, n=n)
    fb = np.fft.rfft(c_b, n=n)
    return np.fft.irfft(fa * fb, n=n)


def inverse_characteristic(c, limit, eps=None):
    """Indices in [0, limit) whose coefficient magnitude exceeds eps."""
    if eps is None:
        eps = config.FFT_EPS
    if config.DEBUG_MODE:
        print(vector_stats(c, limit, eps))
    head = np.abs(c[:limit])
    return np.flatnonzero(head > eps).astype(np.int64)


def vector_stats(c, limit, eps):
    """One-line summary of a convolution vector, for threshold diagnostics.

    absMin/absMax are taken over coefficients above eps only; a healthy
    vector has absMin close to 1 and everything else close to 0.
    """
    head = c[:limit]
    mag = np.abs(head)
    above = mag[mag > eps]
    abs_min = float(above.min()) if len(above) else float('nan')
    abs_max = float(above.max()) if len(above) else 0.0
    return (f"min = {min(0.0, float(head.min())):f}, "
            f"max = {max(0.0, float(head.max())):f}, "
            f"absMin = {abs_min:f}, absMax = {abs_max:f}, "
            f"avg = {float(mag.sum()) / limit:f}")
