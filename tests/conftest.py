"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pydense.core.precision import is_close
from pydense.matrix import Matrix


def _assert_eq_mat(left, right, tol):
    """Asserts that two matrices match cell-wise within an absolute tolerance."""
    assert not left.contains_nan(), f"Left matrix contains NaN:\n{left}"
    assert not right.contains_nan(), f"Right matrix contains NaN:\n{right}"
    assert left.eq(right, tol), f"Matrices do not match:\nleft: {left}\nright: {right}"


def _assert_eq_tol(left, right, tol):
    """Asserts that two scalars match within an absolute tolerance."""
    assert not np.isnan(left), "Left value is NaN"
    assert not np.isnan(right), "Right value is NaN"
    assert is_close(left, right, tol), f"Scalars do not match:\nleft: {left}\nright: {right}"


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def assert_eq_mat():
    return _assert_eq_mat


@pytest.fixture
def assert_eq_tol():
    return _assert_eq_tol


@pytest.fixture
def cholesky_example():
    """SPD matrix with an exactly representable Cholesky factor."""
    A = Matrix.from_rows([[4, 12, -16], [12, 37, -43], [-16, -43, 98]])
    L = Matrix.from_rows([[2, 0, 0], [6, 1, 0], [-8, 5, 3]])
    return A, L
