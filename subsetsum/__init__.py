"""All subset sums below a bound, by dynamic programming or FFT merging.

Usage:
    from subsetsum import subset_sums

    subset_sums({2, 3}, 42)                  # {2, 3, 5}
    subset_sums({2, 3}, 42, method='dp')     # same answer, O(u*n) table
"""
from subsetsum.dp import dynamic_programming_subset_sums, optimized_dp_subset_sums
from subsetsum.fast import fast_minkowski_subset_sums
from subsetsum.merge import SubsetSums, combine, merge_subset_sums
from subsetsum.minkowski import minkowski_sum
from subsetsum.compression import perfect_h, inverse_h
from subsetsum.solvers import SOLVERS, subset_sums
from subsetsum.validation import (InvalidArgument, CapacityExceeded,
                                  InternalInvariantViolation)

__all__ = [
    'subset_sums',
    'SOLVERS',
    'dynamic_programming_subset_sums',
    'optimized_dp_subset_sums',
    'fast_minkowski_subset_sums',
    'SubsetSums',
    'combine',
    'merge_subset_sums',
    'minkowski_sum',
    'perfect_h',
    'inverse_h',
    'InvalidArgument',
    'CapacityExceeded',
    'InternalInvariantViolation',
]
