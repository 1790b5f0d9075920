"""
dp.py: dynamic-programming subset-sum solvers.

Both solvers answer the same question as the FFT solver in fast.py and are
used to cross-check it and for small, dense inputs.

Table semantics: rows i = 0..u-1 are sums, columns j = 0..n-1 are prefixes
of the sorted input. cell(i, j) is True iff some subset of {S[0]..S[j]}
sums exactly to i. Once cell(i, j) is True every cell to its right in row i
is True as well, which is what the compacted variant exploits.
"""

import numpy as np
import numba as nb

from .validation import validate_input, validate_output, sorted_elements


# Column index stored for sums that no subset reaches
UNREACHABLE = np.iinfo(np.int64).max


# ═══════════════════════════════════════════════════════════════════════════════
# Numba JIT kernels
# ═══════════════════════════════════════════════════════════════════════════════

@nb.njit(cache=True)
def fill_table_nb(S, u):
    """Full (u, n) boolean table with the row-monotonicity shortcut."""
    n = len(S)
    table = np.zeros((u, n), dtype=np.bool_)

    # first column has true value only for the first element
    table[S[0], 0] = True

    # first row is entirely true - empty subset sums to 0
    for j in range(n):
        table[0, j] = True

    for i in range(1, u):
        for j in range(1, n):
            r = i - S[j]
            if table[i, j - 1] or (r >= 0 and table[r, j - 1]):
                for jj in range(j, n):
                    table[i, jj] = True
                break
    return table


@nb.njit(cache=True)
def first_true_columns_nb(S, u):
    """Compacted table: state[i] = first column where row i turns True."""
    n = len(S)
    state = np.full(u, UNREACHABLE, dtype=np.int64)
    state[S[0]] = 0
    state[0] = 0

    for i in range(1, u):
        for j in range(1, n):
            r = i - S[j]
            if r < 0:
                # S is sorted, later columns only subtract more
                break
            if state[r] <= j - 1:
                state[i] = j
                break
    return state


# ═══════════════════════════════════════════════════════════════════════════════
# Solvers
# ═══════════════════════════════════════════════════════════════════════════════

def dynamic_programming_subset_sums(S, u):
    """All subset sums of S in [1, u) via the full O(u*n) boolean table."""
    S = list(S)
    validate_input(S, u)
    S = set(S)
    if not S:
        return set()

    arr = sorted_elements(S)
    table = fill_table_nb(arr, int(u))

    last = table[:, -1].copy()
    last[0] = False  # exclude 0 from resulting sums
    sums = set(np.flatnonzero(last).tolist())

    validate_output(sums, u)
    return sums


def optimized_dp_subset_sums(S, u):
    """All subset sums of S in [1, u) using O(u) memory.

    Same recurrence as dynamic_programming_subset_sums, but each row of the
    table is replaced with the index of its first True column.
    """
    S = list(S)
    validate_input(S, u)
    S = set(S)
    if not S:
        return set()

    arr = sorted_elements(S)
    state = first_true_columns_nb(arr, int(u))

    reachable = state[1:] != UNREACHABLE
    sums = set((np.flatnonzero(reachable) + 1).tolist())

    validate_output(sums, u)
    return sums


# ═══════════════════════════════════════════════════════════════════════════════
# Warmup: trigger Numba JIT compilation
# ═══════════════════════════════════════════════════════════════════════════════

def warmup():
    """Compile all Numba kernels by calling them once with small inputs."""
    S = np.array([1, 2, 3], dtype=np.int64)
    _ = fill_table_nb(S, 8)
    _ = first_true_columns_nb(S, 8)
