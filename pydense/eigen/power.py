"""
Power iteration for the dominant eigenpair.
"""

from __future__ import annotations

from pydense.core.exceptions import ConvergenceError
from pydense.core.tolerances import POWER_ITERATION_TOL
from pydense.core.validation import check_max_iter, check_square
from pydense.eigen._common import EigenResult, check_finite_iterate, seed_vector
from pydense.matrix.matrix import Matrix


def power_iteration(
    A: Matrix,
    *,
    tol: float = POWER_ITERATION_TOL,
    max_iter: int | None = None,
) -> EigenResult:
    """
    Determine the dominant eigenvector of a matrix, and its eigenvalue.

    Starting from A's first column, repeatedly forms v' = Av, normalises
    v' to unit l2-norm, and stops once ||v' - v|| < tol. The eigenvalue is
    v'(Av).

    With ``max_iter=None`` (the default) there is no iteration cap: on a
    matrix without a dominant real eigenvalue, e.g. one whose dominant
    eigenvalues are a complex-conjugate pair, this does not terminate.

    Args:
        A: Square matrix (N x N)
        tol: Absolute displacement between successive unit iterates
        max_iter: Optional iteration cap. None means unbounded.

    Returns:
        EigenResult with the dominant eigenpair

    Raises:
        DimensionError: If A is not square
        ConvergenceError: If max_iter is given and exceeded
        NumericalError: If the iterate becomes non-finite
    """
    check_square(A, "A")
    check_max_iter(max_iter)

    v = seed_vector(A)
    iterations = 0

    while True:
        iterations += 1
        v_next = A @ v
        if v_next.l1_norm() == 0.0:
            # v lies in the null space of A
            return EigenResult(
                eigenvalue=0.0,
                eigenvector=v / v.l2_norm(),
                iterations=iterations,
                method='power',
            )
        v_next.l2_normalize()
        check_finite_iterate(v_next, iterations, "power_iteration")

        displacement = (v_next - v).l2_norm()
        v = v_next

        if displacement < tol:
            return EigenResult(
                eigenvalue=v.dot(A @ v),
                eigenvector=v,
                iterations=iterations,
                method='power',
            )

        if max_iter is not None and iterations >= max_iter:
            raise ConvergenceError(
                f"power iteration did not converge after {iterations} iterations "
                f"(final displacement: {displacement:.2e}, tol: {tol:.2e})",
                iterations=iterations,
                final_residual=displacement,
                reason='max_iterations',
                threshold=tol,
            )
