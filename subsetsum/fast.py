"""Sub-quadratic subset sums by interval splitting and FFT merging.

Algorithm from Koiliaris & Xu, arXiv:1507.02318. Expected running time is
O(sqrt(n) * u * log^C(sqrt(n) * u)).

Sorted input is split into k+1 intervals [a_i, a_{i+1}) whose bounds grow
geometrically, so that elements in high intervals (few of which fit in a sum
below u) are merged with the compressed path of merge.py. Each interval is
solved independently, then the interval results are combined.
"""
import math
import time

import numpy as np

from .merge import SubsetSums, combine
from .validation import (InternalInvariantViolation, validate_input,
                         validate_output, sorted_elements)


def ceil_log2(n):
    """Smallest integer k with 2**k >= n, for n >= 1."""
    return (int(n) - 1).bit_length()


def interval_bounds(n, u):
    """Interval boundaries a_0 = 0 < a_1 <= ... <= a_k < a_{k+1} = u.

    a_i = ceil(u / n^((2^k - 2^i + 2) / 2^(k+1))) for 1 <= i <= k, where
    k = ceil(log2(max(ceil(log2(n)), 1))).
    """
    k = ceil_log2(max(ceil_log2(n), 1))
    bounds = [0]
    for i in range(1, k + 1):
        power = (2 ** k - 2 ** i + 2) / 2 ** (k + 1)
        bounds.append(math.ceil(u / n ** power))
    bounds.append(u)
    return bounds


def fast_minkowski_subset_sums(S, u, verbose=False):
    """All subset sums of S in [1, u).

    Parameters
    ----------
    S : iterable of int
        Distinct integers in [1, u-1].
    u : int
        Exclusive upper bound on sums.
    verbose : bool
        Print interval layout and merge statistics.

    Returns
    -------
    set of int
    """
    S = list(S)
    validate_input(S, u)
    S = set(S)
    if not S:
        return set()

    arr = sorted_elements(S)
    n = len(arr)
    bounds = interval_bounds(n, u)
    stats = {}

    if verbose:
        print(f"Fast subset sums: n={n:,}, u={u:,}, intervals={len(bounds) - 1}")
        print(f"  Bounds: {bounds}")

    t0 = time.time()
    interval_results = []
    for i in range(len(bounds) - 1):
        lo_idx, hi_idx = np.searchsorted(arr, [bounds[i], bounds[i + 1]], side='left')
        interval = arr[lo_idx:hi_idx]
        if len(interval) == 0:
            continue  # skip the interval if it's empty

        t_int = time.time()
        seeds = [SubsetSums.of_single_element(x) for x in interval]
        result = combine(seeds, u, stats=stats)
        interval_results.append(result)

        if verbose:
            print(f"  [{bounds[i]:>10,}, {bounds[i + 1]:>10,})  "
                  f"elements={len(interval):>8,}  sums={len(result.sums):>10,}  "
                  f"{time.time() - t_int:.3f}s")

    # merge results from all intervals
    output = combine(interval_results, u, stats=stats)
    sums = set(output.sums.tolist())

    validate_output(sums, u)
    if output.span[0] < 0 or output.span[1] > u - 1:
        raise InternalInvariantViolation(
            f"output span {output.span} is not enclosed by [0, {u - 1}]")
    if output.size != n:
        raise InternalInvariantViolation(
            f"output accounts for {output.size} elements, expected {n}")

    if verbose:
        print(f"  Merges: standard={stats.get('standard', 0):,} "
              f"fast={stats.get('fast', 0):,}")
        print(f"  Completed in {time.time() - t0:.3f}s ({len(sums):,} sums)")

    return sums
