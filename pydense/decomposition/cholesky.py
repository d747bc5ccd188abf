"""
Cholesky factorization.

Input MUST be symmetric positive definite. This is not verified up front:
on a matrix that is not SPD some pivot goes negative, its square root is
NaN, and the NaN propagates through the rest of the factor. Callers check
``contains_nan()`` afterwards, or use ``cholesky_factor`` which does so.
"""

import numpy as np

from pydense.core.exceptions import NotPositiveDefiniteError
from pydense.core.validation import check_square
from pydense.matrix.matrix import Matrix


def cholesky(A: Matrix) -> Matrix:
    """
    Clones the matrix, and writes the Cholesky factor into its lower
    triangle.

    Column by column: take the square root of the diagonal, scale the
    sub-column below it by the reciprocal, then subtract the outer product
    of that sub-column from the trailing lower triangle.

    The strict upper triangle is left holding stale input values; clear it
    with ``to_lower_triangular()``.

    Args:
        A: Symmetric positive definite matrix (N x N)

    Returns:
        N x N matrix whose lower triangle is L with L @ L' = A

    Raises:
        DimensionError: If A is not square
    """
    check_square(A, "A")
    a = A.to_numpy()
    n = a.shape[0]

    with np.errstate(invalid='ignore', divide='ignore'):
        for k in range(n):
            a[k, k] = np.sqrt(a[k, k])
            a[k + 1:, k] /= a[k, k]
            for j in range(k + 1, n):
                a[j:, j] -= a[j:, k] * a[j, k]

    return Matrix.from_numpy(a)


def cholesky_factor(A: Matrix, name: str = "A") -> Matrix:
    """
    Lower-triangular Cholesky factor L of A, upper triangle cleared.

    Args:
        A: Symmetric positive definite matrix (N x N)
        name: Name used in the error message

    Returns:
        Lower triangular L with L @ L' = A

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: If the factor contains NaN
    """
    L = cholesky(A)
    L.to_lower_triangular()
    if L.contains_nan():
        pivot = next(
            (k for k in L.row_iter() if np.isnan(L[k, k])), None
        )
        raise NotPositiveDefiniteError(
            f"{name}: Cholesky factor contains NaN (first NaN pivot: {pivot}); "
            f"matrix is not positive definite",
            matrix_name=name,
            pivot=pivot,
        )
    return L
