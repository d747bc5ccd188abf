"""
Triangular solvers.

Backward substitution for upper-triangular systems and its lower-triangular
mirror. There is no singularity check: a zero diagonal entry produces
inf/NaN in the solution and is the caller's to avoid.
"""

import numpy as np

from pydense.core.validation import (
    check_column_vector,
    check_length,
    check_lower_triangular,
    check_square,
    check_upper_triangular,
)
from pydense.matrix.matrix import Matrix


def _check_system(A: Matrix, b: Matrix) -> None:
    check_square(A, "A")
    check_column_vector(b, "b")
    check_length(b, A.nrows, "b")


def backward_sub(A: Matrix, b: Matrix) -> Matrix:
    """
    Solve A @ x = b for upper-triangular A.

    For k = N down to 1:
        x(k) = (b(k) - sum_{j>k} A(k, j) x(j)) / A(k, k)

    Args:
        A: Upper triangular matrix (N x N)
        b: Right-hand side column vector (N x 1)

    Returns:
        Solution column vector x (N x 1)

    Raises:
        DimensionError: If A is not square or b does not match
        ValidationError: If A is not upper-triangular
    """
    _check_system(A, b)
    check_upper_triangular(A, "A")

    a = A.to_numpy()
    y = b.to_numpy()[:, 0]
    n = a.shape[0]
    x = np.zeros(n)
    for k in range(n - 1, -1, -1):
        x[k] = (y[k] - a[k, k + 1:] @ x[k + 1:]) / a[k, k]
    return Matrix.from_numpy(x[:, np.newaxis])


def forward_sub(L: Matrix, b: Matrix) -> Matrix:
    """
    Solve L @ x = b for lower-triangular L.

    Args:
        L: Lower triangular matrix (N x N)
        b: Right-hand side column vector (N x 1)

    Returns:
        Solution column vector x (N x 1)

    Raises:
        DimensionError: If L is not square or b does not match
        ValidationError: If L is not lower-triangular
    """
    _check_system(L, b)
    check_lower_triangular(L, "L")

    a = L.to_numpy()
    y = b.to_numpy()[:, 0]
    n = a.shape[0]
    x = np.zeros(n)
    for k in range(n):
        x[k] = (y[k] - a[k, :k] @ x[:k]) / a[k, k]
    return Matrix.from_numpy(x[:, np.newaxis])
