"""
Rayleigh-quotient iteration.

Unlike power and inverse iteration this solver is always bounded: it
either returns an eigenpair or raises NoEigenvalueFound.
"""

from __future__ import annotations

import numpy as np

from pydense.core.exceptions import NoEigenvalueFound, ValidationError
from pydense.core.tolerances import EIGENVECTOR_TOL, RAYLEIGH_MAX_ITER
from pydense.core.validation import check_max_iter, check_square
from pydense.eigen._common import EigenResult, eigen_residual
from pydense.matrix.matrix import Matrix
from pydense.solve.least_squares import solve_lls


def rayleigh_quotient_iteration(
    A: Matrix,
    *,
    tol: float = EIGENVECTOR_TOL,
    max_iter: int = RAYLEIGH_MAX_ITER,
    rng: np.random.Generator | None = None,
    verbose: bool = False,
) -> EigenResult:
    """
    Find some eigenpair of A by Rayleigh-quotient iteration.

    Starts from a random unit vector. Each step shifts A by the current
    Rayleigh quotient, solves the shifted system by least squares,
    renormalises, and recomputes the quotient. Converges once the
    residual ||Av - lambda v|| / ||v|| drops below tol.

    Which eigenpair is found depends on the starting vector.

    Args:
        A: Square matrix (N x N)
        tol: Residual tolerance for the eigenvector test
        max_iter: Iteration cap, default 100
        rng: Random generator for the starting vector. A fresh
             ``np.random.default_rng()`` is used when None.
        verbose: Print the estimate after every iteration

    Returns:
        EigenResult with the eigenpair found

    Raises:
        DimensionError: If A is not square
        ValidationError: If max_iter is not a positive int
        NoEigenvalueFound: If max_iter iterations pass without converging
            (reason='max_iterations'), or the iterate becomes NaN
            (reason='nan')
    """
    check_square(A, "A")
    if max_iter is None:
        raise ValidationError("max_iter: Rayleigh-quotient iteration requires a cap")
    check_max_iter(max_iter)

    n = A.nrows
    I = Matrix.eye(n)

    v = Matrix.rand(n, 1, rng=rng)
    v.l2_normalize()
    lam = v.dot(A @ v)

    for iteration in range(1, max_iter + 1):
        B = A - lam * I
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            v = solve_lls(B, v)
            v.l2_normalize()
            lam = v.dot(A @ v)

        if verbose:
            print(f"lambda[{iteration}]: {lam}, v: {v.as_list()}")

        if v.contains_nan() or np.isnan(lam):
            raise NoEigenvalueFound(
                f"Rayleigh-quotient iteration produced NaN at iteration {iteration}",
                iterations=iteration,
                reason='nan',
                threshold=tol,
            )

        if v.is_eigenvector_of(A, tol):
            return EigenResult(
                eigenvalue=lam,
                eigenvector=v,
                iterations=iteration,
                method='rayleigh',
            )

    residual = eigen_residual(v, A)
    raise NoEigenvalueFound(
        f"Rayleigh-quotient iteration found no eigenvalue in {max_iter} iterations "
        f"(final residual: {residual:.2e}, tol: {tol:.2e})",
        iterations=max_iter,
        final_residual=residual,
        reason='max_iterations',
        threshold=tol,
    )
