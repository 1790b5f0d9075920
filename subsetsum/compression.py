"""Coordinate compression for Minkowski sums of high, narrow value sets.

Subset sums of j elements drawn from [d, d + l) lie in
[j*d, j*d + j*(l-1)]: a quotient j and a small remainder. The S-perfect map

    h(x) = 2*l * (x // d) + (x % d)

keeps the quotient but packs the remainders into blocks of width 2*l instead
of d, so h(A) ⊕ h(B) needs a far shorter FFT than A ⊕ B. While remainders
stay below l, two of them add up to less than 2*l, no carry crosses a block,
and inverse_h(h(a) + h(b)) == a + b.

The map is only applied when d >= 2*l. Otherwise both functions are the
identity.
"""
import numpy as np


def perfect_h(S, d, l):
    """Compute h(S) = {h(x) | x in S} as a sorted unique int64 array.

    Parameters
    ----------
    S : array-like of int
        Set to map. Elements are expected in [d, d + l) up to multiples of d.
    d : int
        Lower bound of the span covering the underlying elements.
    l : int
        Length of the span covering remainders.
    """
    S = np.asarray(S, dtype=np.int64)
    if d >= 2 * l:
        q, r = np.divmod(S, d)
        return np.unique(2 * l * q + r)
    return np.unique(S)


def inverse_h(hS, d, l):
    """Compute h^-1(hS); exact inverse of perfect_h for the same (d, l)."""
    hS = np.asarray(hS, dtype=np.int64)
    if d >= 2 * l:
        q, r = np.divmod(hS, 2 * l)
        return np.unique(d * q + r)
    return np.unique(hS)
