"""
Random structured matrix constructors.

Both constructors draw from an injected ``np.random.Generator`` so that
callers (and tests) control reproducibility.
"""

import numpy as np

from pydense.matrix.matrix import Matrix


def symmetric(n: int, rng: np.random.Generator | None = None) -> Matrix:
    """Random symmetric n x n matrix, (X + X') / 2 for uniform random X."""
    X = Matrix.rand(n, n, rng=rng)
    return (X + X.transpose()) / 2.0


def symmetric_positive_definite(
    n: int,
    rng: np.random.Generator | None = None,
) -> Matrix:
    """
    Random symmetric positive-definite n x n matrix.

    Adds the identity to a random symmetric matrix, shifting every
    eigenvalue up by one. With entries drawn from [0, 1) this is usually,
    but not always, enough to make the result positive definite; callers
    that need a guarantee should check the Cholesky factor for NaN.
    """
    return symmetric(n, rng=rng) + Matrix.eye(n)
