"""
Tests for the dynamic-programming solvers in subsetsum/dp.py:
- Known small inputs
- Agreement with power-set enumeration
- Agreement between the full and compacted tables
- Input validation
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))
from subsetsum.dp import (
    dynamic_programming_subset_sums,
    optimized_dp_subset_sums,
    fill_table_nb,
    first_true_columns_nb,
    UNREACHABLE,
    warmup,
)
from subsetsum.validation import InvalidArgument, InternalInvariantViolation, validate_output
from reference import naive_subset_sums_set, random_set

# Trigger Numba JIT compilation before tests run
warmup()

DP_SOLVERS = [dynamic_programming_subset_sums, optimized_dp_subset_sums]


# ─── Known inputs ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("solver", DP_SOLVERS)
class TestKnownInputs:
    def test_one_to_five(self, solver):
        """Sums of {1..5} cover 1..15 exactly."""
        assert solver({1, 2, 3, 4, 5}, 100) == set(range(1, 16))

    def test_empty(self, solver):
        assert solver(set(), 42) == set()

    def test_singleton(self, solver):
        assert solver({7}, 42) == {7}

    def test_pair(self, solver):
        assert solver({2, 3}, 42) == {2, 3, 5}

    def test_pair_bound_excludes_total(self, solver):
        """5 is not < 5, so the full sum is dropped."""
        assert solver({2, 3}, 5) == {2, 3}

    def test_accepts_any_iterable(self, solver):
        assert solver([3, 2, 3], 42) == {2, 3, 5}

    def test_gap(self, solver):
        """{4, 9}: 13 reachable, nothing between 4 and 9."""
        assert solver({4, 9}, 20) == {4, 9, 13}


# ─── Against power-set enumeration ──────────────────────────────────────────

class TestAgainstNaive:
    def test_randomized(self):
        rng = np.random.default_rng(42)
        for _ in range(50):
            u = int(rng.integers(2, 200))
            S = random_set(rng, u, 10)
            expected = naive_subset_sums_set(S, u)
            assert dynamic_programming_subset_sums(S, u) == expected
            assert optimized_dp_subset_sums(S, u) == expected

    def test_full_and_compacted_agree_on_dense_input(self):
        rng = np.random.default_rng(7)
        S = random_set(rng, 2000, 300)
        assert dynamic_programming_subset_sums(S, 2000) == optimized_dp_subset_sums(S, 2000)


# ─── Kernels ────────────────────────────────────────────────────────────────

class TestKernels:
    def test_table_row_monotone(self):
        """Once a row turns True it stays True to the right."""
        S = np.array([2, 3, 7, 11], dtype=np.int64)
        table = fill_table_nb(S, 30)
        for i in range(30):
            row = table[i]
            first = np.argmax(row) if row.any() else len(row)
            assert row[first:].all()

    def test_compacted_matches_table(self):
        """state[i] is the first True column of row i in the full table."""
        S = np.array([2, 3, 7, 11], dtype=np.int64)
        table = fill_table_nb(S, 30)
        state = first_true_columns_nb(S, 30)
        for i in range(30):
            if table[i].any():
                assert state[i] == np.argmax(table[i])
            else:
                assert state[i] == UNREACHABLE

    def test_base_cases(self):
        S = np.array([3, 5], dtype=np.int64)
        table = fill_table_nb(S, 10)
        assert table[0].all()
        assert np.flatnonzero(table[:, 0]).tolist() == [0, 3]


# ─── Validation ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("solver", DP_SOLVERS)
class TestValidation:
    def test_nonpositive_u(self, solver):
        with pytest.raises(InvalidArgument):
            solver({1}, 0)

    def test_element_equal_to_u(self, solver):
        with pytest.raises(InvalidArgument):
            solver({1, 10}, 10)

    def test_zero_element(self, solver):
        with pytest.raises(InvalidArgument):
            solver({0, 1}, 10)

    def test_non_integer_element(self, solver):
        with pytest.raises(InvalidArgument):
            solver({1.5}, 10)

    def test_is_value_error(self, solver):
        with pytest.raises(ValueError):
            solver({-1}, 10)

    def test_bool_element(self, solver):
        """True is an Integral but not an input element."""
        with pytest.raises(InvalidArgument):
            solver({True}, 10)

    def test_bool_bound(self, solver):
        with pytest.raises(InvalidArgument):
            solver(set(), True)

    def test_unhashable_element(self, solver):
        with pytest.raises(InvalidArgument):
            solver([[1, 2]], 10)


# ─── Output self-check ──────────────────────────────────────────────────────

class TestOutputCheck:
    def test_zero_rejected(self):
        with pytest.raises(InternalInvariantViolation):
            validate_output({0}, 5)

    def test_bound_rejected(self):
        with pytest.raises(InternalInvariantViolation):
            validate_output({5}, 5)

    def test_in_range_accepted(self):
        validate_output({1, 4}, 5)

    def test_not_a_user_error(self):
        assert not issubclass(InternalInvariantViolation, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
