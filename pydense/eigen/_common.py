"""
Shared types and helpers for the eigensolvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np

from pydense.core.exceptions import NumericalError
from pydense.matrix.matrix import Matrix

EigenMethod = Literal['power', 'inverse', 'rayleigh']


@dataclass(frozen=True)
class EigenResult:
    """
    An eigenpair found by an iterative solver.

    Unpacks as ``eigenvalue, eigenvector = result``.

    Attributes:
        eigenvalue: Rayleigh quotient of the final iterate
        eigenvector: Unit-norm column vector
        iterations: Number of iterations performed
        method: Solver that produced the pair
    """
    eigenvalue: float
    eigenvector: Matrix
    iterations: int
    method: EigenMethod

    def __iter__(self) -> Iterator[float | Matrix]:
        return iter((self.eigenvalue, self.eigenvector))


def rayleigh_quotient(v: Matrix, A: Matrix) -> float:
    """
    Rayleigh quotient v'Av / v'v.

    Useful for calculating the eigenvalue of v when it is known that it is
    an eigenvector of A.
    """
    return v.dot(A @ v) / v.dot(v)


def eigen_residual(v: Matrix, A: Matrix) -> float:
    """Residual ||Av - lambda v|| / ||v|| with lambda the Rayleigh quotient."""
    u = v / v.l2_norm()
    Au = A @ u
    return (Au - u.dot(Au) * u).l2_norm()


def seed_vector(A: Matrix) -> Matrix:
    """
    Starting vector for deterministic iterations: A's first column.

    A zero first column cannot be normalised, so the first nonzero column
    is taken instead; for the zero matrix the first canonical basis vector
    is returned.
    """
    for j in A.col_iter():
        c = A.col(j)
        if c.l1_norm() > 0:
            return c
    e = Matrix(A.nrows, 1)
    e.canonical_basis(1)
    return e


def check_finite_iterate(v: Matrix, iterations: int, name: str) -> None:
    """
    Abort an iteration whose vector has blown up.

    Raises:
        NumericalError: If v contains NaN or inf
    """
    if not np.all(np.isfinite(v.to_numpy())):
        raise NumericalError(
            f"{name}: iterate became non-finite after {iterations} iterations"
        )
