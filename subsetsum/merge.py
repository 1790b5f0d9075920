"""Pairwise merging of partial subset-sum results.

Implements Theorem 2 of Koiliaris & Xu, "A Faster Pseudopolynomial Time
Algorithm for Subset Sum" (arXiv:1507.02318):

    Let A and B be two sequences with total length n, all elements in
    a + [l-1]. Given Σu(A) and Σu(B), Σu(AB) = (Σu(A) + Σu(B)) ∩ [u-1]
    can be computed in O~(min{l*k^2, u}) time, where k = min{n, u/a}.
"""
from collections import namedtuple

import numpy as np

from .compression import perfect_h, inverse_h
from .minkowski import minkowski_sum
from .validation import InvalidArgument


class SubsetSums(namedtuple('SubsetSums', ['sums', 'span', 'size'])):
    """Subset sums of a stretch of the sorted input, plus its metadata.

    sums : sorted unique int64 array of achievable non-empty subset sums
    span : (lo, hi) closed range enclosing every element of the stretch
    size : number of input elements in the stretch
    """
    __slots__ = ()

    @classmethod
    def of_single_element(cls, x):
        x = int(x)
        return cls(np.array([x], dtype=np.int64), (x, x), 1)


def _merge_params(ss_a, ss_b, u):
    """(span, a, l, n, k) for the merge of ss_a and ss_b under bound u."""
    span = (min(ss_a.span[0], ss_b.span[0]), max(ss_a.span[1], ss_b.span[1]))
    a = span[0]
    if a < 1:
        raise InvalidArgument(f"span lower bound must be >= 1, was: {a}")
    l = span[1] + 1 - a
    n = ss_a.size + ss_b.size
    k = min(n, -(-u // a))
    return span, a, l, n, k


def merge_path(ss_a, ss_b, u):
    """Return 'standard' if k^2 * l >= u, else 'fast' (compressed)."""
    _, _, l, _, k = _merge_params(ss_a, ss_b, u)
    return 'standard' if k * k * l >= u else 'fast'


def merge_subset_sums(ss_a, ss_b, u, stats=None):
    """Subset sums of the concatenation of two stretches, limited to < u.

    If stats is a dict, the path taken ('standard' or 'fast') is counted in it.
    """
    span, a, l, n, k = _merge_params(ss_a, ss_b, u)
    path = 'standard' if k * k * l >= u else 'fast'
    if stats is not None:
        stats[path] = stats.get(path, 0) + 1

    if path == 'standard':
        C = minkowski_sum(ss_a.sums, ss_b.sums)
    else:
        # shrink the value range before convolving
        max_l = k * l
        h_a = perfect_h(ss_a.sums, a, max_l)
        h_b = perfect_h(ss_b.sums, a, max_l)
        C = inverse_h(minkowski_sum(h_a, h_b), a, max_l)

    sums = np.union1d(np.union1d(ss_a.sums, ss_b.sums), C)
    sums = sums[sums < u]
    return SubsetSums(sums, span, n)


def combine(parts, u, stats=None):
    """Reduce a sequence of SubsetSums to one by merging adjacent pairs.

    Each round merges parts (0,1), (2,3), ... and carries an odd trailing part
    through unchanged, until a single result remains.

    Parameters
    ----------
    parts : sequence of SubsetSums
        Partial results over adjacent, disjoint stretches, in order.
    u : int
        Bound on sums.
    stats : dict or None
        If given, merge counts per path ('standard', 'fast') are added to it.
    """
    parts = list(parts)
    if not parts:
        raise InvalidArgument("sets must have at least one element!")

    while len(parts) > 1:
        merged = []
        for i in range(0, len(parts) - 1, 2):
            merged.append(merge_subset_sums(parts[i], parts[i + 1], u, stats=stats))
        if len(parts) % 2 == 1:
            merged.append(parts[-1])
        parts = merged

    return parts[0]
