"""
Shifted inverse iteration.
"""

from __future__ import annotations

import numpy as np

from pydense.core.exceptions import ConvergenceError
from pydense.core.tolerances import EIGENVECTOR_TOL
from pydense.core.validation import check_max_iter, check_square
from pydense.eigen._common import (
    EigenResult,
    check_finite_iterate,
    eigen_residual,
    seed_vector,
)
from pydense.matrix.matrix import Matrix
from pydense.solve.least_squares import solve_lls


def inverse_iteration(
    A: Matrix,
    shift: float,
    *,
    tol: float = EIGENVECTOR_TOL,
    max_iter: int | None = None,
) -> EigenResult:
    """
    Eigenpair of A whose eigenvalue is nearest to ``shift``.

    Forms B = A - shift * I and repeatedly solves B v = v_prev by least
    squares (never inverting B), renormalising each time, until v is an
    eigenvector of B to within tol. The eigenvalue reported is the
    Rayleigh quotient of A, not of B.

    With ``max_iter=None`` (the default) there is no iteration cap.

    Args:
        A: Square matrix (N x N)
        shift: Target for the eigenvalue
        tol: Residual tolerance for the eigenvector test
        max_iter: Optional iteration cap. None means unbounded.

    Returns:
        EigenResult with the eigenpair nearest the shift

    Raises:
        DimensionError: If A is not square
        ConvergenceError: If max_iter is given and exceeded
        NumericalError: If the iterate becomes non-finite, e.g. when the
            shift is exactly an eigenvalue
    """
    check_square(A, "A")
    check_max_iter(max_iter)

    v = seed_vector(A)
    B = A - shift * Matrix.eye(A.nrows)
    iterations = 0

    while True:
        iterations += 1
        with np.errstate(divide='ignore', invalid='ignore'):
            v = solve_lls(B, v)
            v.l2_normalize()
        check_finite_iterate(v, iterations, "inverse_iteration")

        if v.is_eigenvector_of(B, tol):
            return EigenResult(
                eigenvalue=v.dot(A @ v),
                eigenvector=v,
                iterations=iterations,
                method='inverse',
            )

        if max_iter is not None and iterations >= max_iter:
            residual = eigen_residual(v, B)
            raise ConvergenceError(
                f"inverse iteration did not converge after {iterations} iterations "
                f"(final residual: {residual:.2e}, tol: {tol:.2e})",
                iterations=iterations,
                final_residual=residual,
                reason='max_iterations',
                threshold=tol,
            )
