"""Name -> solver registry and the single dispatching entry point."""
from . import config
from .dp import dynamic_programming_subset_sums, optimized_dp_subset_sums
from .fast import fast_minkowski_subset_sums
from .validation import InvalidArgument

SOLVERS = {
    'dp': dynamic_programming_subset_sums,
    'optimized_dp': optimized_dp_subset_sums,
    'fast': fast_minkowski_subset_sums,
}


def subset_sums(S, u, method=None):
    """Given a positive integer u and a set S of integers in [1, u-1],
    return every subset sum less than u (excluding the empty sum).

    method selects the algorithm: 'dp', 'optimized_dp' or 'fast'
    (default config.DEFAULT_METHOD).
    """
    if method is None:
        method = config.DEFAULT_METHOD
    solver = SOLVERS.get(method)
    if solver is None:
        raise InvalidArgument(f"Unknown method: {method}. Choose from {sorted(SOLVERS)}")
    return solver(S, u)
