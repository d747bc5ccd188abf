"""
Least squares and SPD solves built on the decompositions.
"""

from pydense.core.validation import (
    check_column_vector,
    check_length,
    check_tall,
)
from pydense.decomposition.cholesky import cholesky_factor
from pydense.decomposition.qr import householder
from pydense.matrix.matrix import Matrix
from pydense.solve.triangular import backward_sub, forward_sub


def solve_lls(A: Matrix, b: Matrix) -> Matrix:
    """
    Solve least squares via Householder QR.

    Solves: min_x ||A x - b||_2

    The solution is computed as:
        A = QR
        v = Q'b
        x = R1^-1 v1
    where R1 and v1 are the top N rows of R and v.

    Args:
        A: Matrix (M x N), must have M >= N
        b: Right-hand side column vector (M x 1)

    Returns:
        Solution column vector x (N x 1)

    Raises:
        DimensionError: If M < N or b does not have M rows
    """
    check_tall(A, "A")
    check_column_vector(b, "b")
    check_length(b, A.nrows, "b")

    Q, R = householder(A)
    v = Q.t() @ b

    n = A.ncols
    return backward_sub(R.top_n_rows(n), v.top_n_rows(n))


def cholesky_solve(A: Matrix, b: Matrix) -> Matrix:
    """
    Solve A x = b for symmetric positive definite A.

    Factors A = LL', then solves L y = b by forward substitution and
    L'x = y by backward substitution.

    Args:
        A: Symmetric positive definite matrix (N x N)
        b: Right-hand side column vector (N x 1)

    Returns:
        Solution column vector x (N x 1)

    Raises:
        DimensionError: If A is not square or b does not match
        NotPositiveDefiniteError: If A is not positive definite
    """
    L = cholesky_factor(A)
    y = forward_sub(L, b)
    return backward_sub(L.t(), y)
