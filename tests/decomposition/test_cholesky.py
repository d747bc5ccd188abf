"""
Tests for Cholesky factorization.

Validates:
    - Exact factor on a matrix with integer Cholesky factor
    - L @ L' reconstructs random SPD input
    - cholesky() leaves the upper triangle stale and signals failure by NaN
    - cholesky_factor() clears the upper triangle and raises on failure
    - Agreement with LAPACK (scipy)
"""

import numpy as np
import pytest
import scipy.linalg

from pydense.core import tolerances
from pydense.core.exceptions import DimensionError, NotPositiveDefiniteError
from pydense.decomposition import cholesky, cholesky_factor
from pydense.matrix import Matrix, symmetric_positive_definite

REPS = 25

CHOLESKY_TOL = tolerances.CHOLESKY.atol


class TestCholesky:

    def test_exact_example(self, cholesky_example, assert_eq_mat):
        A, L_expected = cholesky_example
        L = cholesky(A)
        L.to_lower_triangular()
        assert_eq_mat(L, L_expected, CHOLESKY_TOL)
        assert_eq_mat(L @ L.t(), A, CHOLESKY_TOL)

    def test_upper_triangle_is_stale(self, cholesky_example):
        A, _ = cholesky_example
        L = cholesky(A)
        assert L[1, 2] == 12.0
        assert L[1, 3] == -16.0
        assert L[2, 3] == -43.0

    def test_input_untouched(self, cholesky_example):
        A, _ = cholesky_example
        before = A.copy()
        cholesky(A)
        assert A.eq(before, 0.0)

    def test_reconstructs_random_spd(self, rng, assert_eq_mat):
        successes = 0
        for _ in range(REPS):
            A = symmetric_positive_definite(4, rng=rng)
            L = cholesky(A)
            if L.contains_nan():
                # Shifted random symmetric input is not always SPD
                continue
            L.to_lower_triangular()
            assert_eq_mat(L @ L.t(), A, CHOLESKY_TOL)
            successes += 1
        assert successes > 0

    def test_not_positive_definite_gives_nan(self):
        L = cholesky(Matrix.from_rows([[1, 2], [2, 1]]))
        assert L.contains_nan()
        assert L[1, 1] == 1.0
        assert np.isnan(L[2, 2])

    def test_not_square(self):
        with pytest.raises(DimensionError):
            cholesky(Matrix(3, 2))

    def test_matches_lapack(self, rng):
        for _ in range(REPS):
            X = Matrix.rand(6, 6, rng=rng)
            A = X @ X.t() + 6.0 * Matrix.eye(6)
            L = cholesky_factor(A)
            L_ref = scipy.linalg.cholesky(A.to_numpy(), lower=True)
            np.testing.assert_allclose(L.to_numpy(), L_ref, atol=1e-12)


class TestCholeskyFactor:

    def test_upper_triangle_cleared(self, cholesky_example, assert_eq_mat):
        A, L_expected = cholesky_example
        L = cholesky_factor(A)
        assert L.is_lower_triangular()
        assert_eq_mat(L, L_expected, CHOLESKY_TOL)

    def test_raises_with_pivot(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_factor(Matrix.from_rows([[1, 2], [2, 1]]), name="K")
        assert exc_info.value.matrix_name == "K"
        assert exc_info.value.pivot == 2

    def test_negative_first_pivot(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_factor(Matrix.from_rows([[-1, 0], [0, 1]]))
        assert exc_info.value.pivot == 1
